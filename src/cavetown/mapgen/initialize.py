# src/cavetown/mapgen/initialize.py
# Noise fill: solid outer ring, random interior.

from ..grid import CaveGrid
from ..rng import CaveRandom, to_float32
from ..tiles import OPEN, WALL


def is_border(grid: CaveGrid, x: int, y: int) -> bool:
    return x == 0 or x == grid.width - 1 or y == 0 or y == grid.height - 1


def initialize(grid: CaveGrid, rng: CaveRandom, wall_probability: float) -> None:
    """
    Row-major scan (y outer, x inner). Border cells become WALL without
    touching the rng; every interior cell consumes exactly one uniform01()
    draw. The scan order is what makes a seed reproducible, so keep it.
    """
    # The threshold is a single-precision float in the original.
    threshold = to_float32(wall_probability)
    for y in range(grid.height):
        for x in range(grid.width):
            if is_border(grid, x, y):
                grid.set(x, y, WALL)
            else:
                grid.set(x, y, WALL if rng.uniform01() < threshold else OPEN)
