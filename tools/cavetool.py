#!/usr/bin/env python3
import argparse, os
from cavetown.config import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_SEED, DEFAULT_WALL_PROBABILITY,
    DEFAULT_SMOOTH_ITERATIONS, DEFAULT_OBSTACLE_COUNT,
    GenerationParameters, InvalidParameter,
)
from cavetown.export import fixture_name, render_text, save_json, write_tsv
from cavetown.mapgen.generator import generate_with_report

def params_from_args(args) -> GenerationParameters:
    return GenerationParameters(
        width=args.width,
        height=args.height,
        seed=args.seed,
        wall_probability=args.wall_prob,
        smooth_iterations=args.iterations,
        obstacle_count=args.obstacles,
    )

def build(params):
    try:
        return generate_with_report(params)
    except InvalidParameter as e:
        raise SystemExit(f"invalid parameters: {e}")

def cmd_emit(args):
    grid, placed = build(params_from_args(args))
    save_json(grid, args.out)
    print(f"Cave grid exported to {args.out} ({placed}/{args.obstacles} obstacles placed)")

def cmd_print(args):
    grid, _ = build(params_from_args(args))
    print(render_text(grid), end="")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    base = params_from_args(args)
    for seed in range(args.first_seed, args.first_seed + args.count):
        grid, _ = build(base.with_seed(seed))
        path = os.path.join(args.outdir, fixture_name(base.with_seed(seed)))
        write_tsv(grid, path)
    print(f"Wrote golden pack to {args.outdir}")

def add_generation_args(p):
    p.add_argument('--width', type=int, default=DEFAULT_WIDTH)
    p.add_argument('--height', type=int, default=DEFAULT_HEIGHT)
    p.add_argument('--seed', type=int, default=DEFAULT_SEED)
    p.add_argument('--wall-prob', type=float, default=DEFAULT_WALL_PROBABILITY)
    p.add_argument('--iterations', type=int, default=DEFAULT_SMOOTH_ITERATIONS)
    p.add_argument('--obstacles', type=int, default=DEFAULT_OBSTACLE_COUNT)

def main(argv=None):
    p = argparse.ArgumentParser(description="Cellular-automaton cave generator")
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit', help="write the cave as JSON")
    add_generation_args(p1)
    p1.add_argument('--out', type=str, default="cave_data.json")
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('print', help="print the cave as #/. text")
    add_generation_args(p2)
    p2.set_defaults(func=cmd_print)
    p3 = sub.add_parser('golden', help="write a pack of seeded TSV fixtures")
    add_generation_args(p3)
    p3.add_argument('--first-seed', type=int, default=1)
    p3.add_argument('--count', type=int, default=8)
    p3.add_argument('--outdir', type=str, required=True)
    p3.set_defaults(func=cmd_golden)
    args = p.parse_args(argv)
    args.func(args)

if __name__ == '__main__':
    main()
