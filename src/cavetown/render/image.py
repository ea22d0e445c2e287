# src/cavetown/render/image.py
# Render a cave to a PNG with Pillow, one flat-coloured square per cell.

import os
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from ..grid import CaveGrid
from ..tiles import OPEN, WALL

RGBA = Tuple[int, int, int, int]

CELL_COLORS: Dict[int, RGBA] = {
    WALL: (80, 80, 80, 255),
    OPEN: (220, 220, 220, 255),
}
BACKGROUND: RGBA = (0, 0, 0, 0)


def render_image(grid: CaveGrid, tile_size: int = 8, margin: int = 0,
                 colors: Optional[Dict[int, RGBA]] = None) -> Image.Image:
    if tile_size <= 0:
        raise ValueError("tile_size must be positive")
    colors = colors or CELL_COLORS
    w = grid.width * tile_size + 2 * margin
    h = grid.height * tile_size + 2 * margin
    canvas = Image.new("RGBA", (w, h), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    for y in range(grid.height):
        for x in range(grid.width):
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            draw.rectangle(
                (x0, y0, x0 + tile_size - 1, y0 + tile_size - 1),
                fill=colors[grid.get(x, y)],
            )
    return canvas


def render_png(grid: CaveGrid, out_png: str, tile_size: int = 8, margin: int = 0) -> Image.Image:
    img = render_image(grid, tile_size=tile_size, margin=margin)
    out_dir = os.path.dirname(out_png)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    img.save(out_png)
    return img
