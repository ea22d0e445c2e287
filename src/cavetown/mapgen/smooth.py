# src/cavetown/mapgen/smooth.py
# Majority-rule cellular automaton over the Moore neighbourhood.
#
# Each generation reads a frozen snapshot and writes a fresh buffer; only
# interior cells are recomputed, so the outer ring stays WALL.
#
#   walls >= 5  -> WALL
#   walls <= 3  -> OPEN
#   walls == 4  -> unchanged

from ..config import DEFAULT_SMOOTH_ITERATIONS, InvalidParameter
from ..grid import CaveGrid
from ..tiles import OPEN, WALL, is_wall

WALL_AT_LEAST = 5
OPEN_AT_MOST = 3


def count_neighbor_walls(grid: CaveGrid, x: int, y: int, radius: int = 1) -> int:
    """Walls in the (2r+1)^2 - 1 cells around (x, y); off-grid counts as wall."""
    count = 0
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx == 0 and dy == 0:
                continue
            if is_wall(grid.get(x + dx, y + dy)):
                count += 1
    return count


def next_cell(current: int, walls: int) -> int:
    if walls >= WALL_AT_LEAST:
        return WALL
    if walls <= OPEN_AT_MOST:
        return OPEN
    return current


def smooth_step(grid: CaveGrid) -> CaveGrid:
    """One generation. The input grid is left untouched."""
    out = grid.copy()
    for y in range(1, grid.height - 1):
        for x in range(1, grid.width - 1):
            walls = count_neighbor_walls(grid, x, y, 1)
            out.set(x, y, next_cell(grid.get(x, y), walls))
    return out


def smooth(grid: CaveGrid, iterations: int = DEFAULT_SMOOTH_ITERATIONS) -> CaveGrid:
    if iterations < 0:
        raise InvalidParameter(f"iterations must be >= 0, got {iterations}")
    for _ in range(iterations):
        grid.swap_in(smooth_step(grid))
    return grid
