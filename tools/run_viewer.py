#!/usr/bin/env python3
# Minimal interactive cave viewer.
# - LEFT/RIGHT: previous/next seed
# - UP/DOWN:    smoothing iterations +1/-1
# - O:          toggle obstacles
# - S:          save the current cave as JSON
# - 60 Hz fixed loop

import argparse
import pygame
from cavetown.config import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT, DEFAULT_SEED, DEFAULT_WALL_PROBABILITY,
    DEFAULT_SMOOTH_ITERATIONS, DEFAULT_OBSTACLE_COUNT,
    GenerationParameters, InvalidParameter,
)
from cavetown.export import save_json
from cavetown.mapgen.generator import generate_with_report
from cavetown.render.tileset import Tileset

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    ap.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED)
    ap.add_argument("--wall-prob", type=float, default=DEFAULT_WALL_PROBABILITY)
    ap.add_argument("--iterations", type=int, default=DEFAULT_SMOOTH_ITERATIONS)
    ap.add_argument("--obstacles", type=int, default=DEFAULT_OBSTACLE_COUNT)
    ap.add_argument("--tile", type=int, default=16, help="Cell size in pixels")
    ap.add_argument("--out", type=str, default="cave_data.json", help="Path used by S")
    args = ap.parse_args()

    pygame.init()
    pygame.display.set_caption("Cavetown Viewer")
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((args.width * args.tile, args.height * args.tile))
    tiles = Tileset(args.tile)

    seed, iterations = args.seed, args.iterations
    obstacles_on = True

    def load_grid():
        params = GenerationParameters(
            width=args.width, height=args.height, seed=seed,
            wall_probability=args.wall_prob, smooth_iterations=iterations,
            obstacle_count=args.obstacles if obstacles_on else 0,
        )
        try:
            return generate_with_report(params)
        except InvalidParameter as e:
            raise SystemExit(f"[viewer] invalid parameters: {e}")

    grid, placed = load_grid()
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_RIGHT:
                    seed += 1
                    grid, placed = load_grid()
                elif ev.key == pygame.K_LEFT:
                    seed = max(0, seed - 1)
                    grid, placed = load_grid()
                elif ev.key == pygame.K_UP:
                    iterations += 1
                    grid, placed = load_grid()
                elif ev.key == pygame.K_DOWN:
                    iterations = max(0, iterations - 1)
                    grid, placed = load_grid()
                elif ev.key == pygame.K_o:
                    obstacles_on = not obstacles_on
                    grid, placed = load_grid()
                elif ev.key == pygame.K_s:
                    save_json(grid, args.out)
                    print(f"[viewer] saved seed {seed} to {args.out}")

        screen.fill((0, 0, 0))
        for y in range(grid.height):
            for x in range(grid.width):
                screen.blit(tiles.view(grid.get(x, y), args.tile), (x * args.tile, y * args.tile))

        pygame.display.set_caption(
            f"Cavetown Viewer - seed {seed}  iterations {iterations}  "
            f"obstacles {placed if obstacles_on else 'off'}"
        )
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
