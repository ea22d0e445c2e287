#!/usr/bin/env python3
# Render exported cave files (JSON, TSV or #/. text) to PNGs using Pillow.

import argparse, os
from cavetown.export import load_grid_file
from cavetown.render.image import render_png

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("inputs", nargs="+", help="Cave files: .json (emit), .tsv (golden) or .txt (print)")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--tile", type=int, default=8, help="Cell size in pixels")
    ap.add_argument("--margin", type=int, default=0, help="Transparent border in pixels")
    args = ap.parse_args(argv)

    for path in args.inputs:
        try:
            grid = load_grid_file(path)
        except ValueError as e:
            raise SystemExit(f"{path}: {e}")
        stem = os.path.splitext(os.path.basename(path))[0]
        png = os.path.join(args.outdir, f"{stem}.png")
        render_png(grid, png, tile_size=args.tile, margin=args.margin)
        print(f"Wrote {png}")

if __name__ == "__main__":
    main()
