# src/cavetown/mapgen/obstacles.py
# Best-effort rock blobs stamped onto the smoothed cave.

from typing import List, Tuple

from ..config import (
    DEFAULT_OBSTACLE_COUNT, MIN_OBSTACLE_GRID, OBSTACLE_MARGIN,
    OBSTACLE_MAX_SIZE, OBSTACLE_MIN_SIZE, InvalidParameter,
)
from ..grid import CaveGrid
from ..rng import CaveRandom
from ..tiles import OPEN, WALL


def disc_offsets(size: int) -> List[Tuple[int, int]]:
    """Offsets (dx, dy) of a filled disc: dx^2 + dy^2 <= size^2."""
    r2 = size * size
    return [
        (dx, dy)
        for dy in range(-size, size + 1)
        for dx in range(-size, size + 1)
        if dx * dx + dy * dy <= r2
    ]


def stamp_disc(grid: CaveGrid, cx: int, cy: int, size: int) -> None:
    """Set every in-bounds cell of the disc to WALL; off-grid cells are dropped."""
    for dx, dy in disc_offsets(size):
        x, y = cx + dx, cy + dy
        if grid.in_bounds(x, y):
            grid.set(x, y, WALL)


def add_obstacles(grid: CaveGrid, rng: CaveRandom, count: int = DEFAULT_OBSTACLE_COUNT) -> int:
    """
    Make `count` placement attempts and return how many obstacles landed.

    Per attempt the rng is drawn three times, in order: cx in
    [5, width-5], cy in [5, height-5], size in {1, 2, 3}. An attempt whose
    centre is already WALL is dropped without a retry, so fewer than `count`
    obstacles may be placed.
    """
    if count < 0:
        raise InvalidParameter(f"count must be >= 0, got {count}")
    if count and (grid.width < MIN_OBSTACLE_GRID or grid.height < MIN_OBSTACLE_GRID):
        raise InvalidParameter(
            f"obstacles need a grid of at least {MIN_OBSTACLE_GRID}x{MIN_OBSTACLE_GRID}")

    placed = 0
    for _ in range(count):
        cx = rng.uniform_int(OBSTACLE_MARGIN, grid.width - OBSTACLE_MARGIN)
        cy = rng.uniform_int(OBSTACLE_MARGIN, grid.height - OBSTACLE_MARGIN)
        size = rng.uniform_int(OBSTACLE_MIN_SIZE, OBSTACLE_MAX_SIZE)
        if grid.get(cx, cy) != OPEN:
            continue
        stamp_disc(grid, cx, cy, size)
        placed += 1
    return placed
