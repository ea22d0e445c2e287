# src/cavetown/mapgen/generator.py
# Canonical cave pipeline: noise -> smoothing -> obstacles, one shared rng.

from typing import Tuple

from ..config import (
    DEFAULT_OBSTACLE_COUNT, DEFAULT_SEED, DEFAULT_SMOOTH_ITERATIONS,
    DEFAULT_WALL_PROBABILITY, GenerationParameters,
)
from ..grid import CaveGrid
from .initialize import initialize
from .obstacles import add_obstacles
from .smooth import smooth


def generate_with_report(params: GenerationParameters) -> Tuple[CaveGrid, int]:
    """Run the pipeline; return the grid and the number of obstacles placed."""
    params.validate()   # before any grid exists
    grid, rng = CaveGrid.create(params.width, params.height, params.seed)

    initialize(grid, rng, params.wall_probability)
    smooth(grid, params.smooth_iterations)
    placed = add_obstacles(grid, rng, params.obstacle_count)
    return grid, placed


def generate_grid(params: GenerationParameters) -> CaveGrid:
    grid, _ = generate_with_report(params)
    return grid


def generate_cave(
    width: int,
    height: int,
    seed: int = DEFAULT_SEED,
    wall_probability: float = DEFAULT_WALL_PROBABILITY,
    smooth_iterations: int = DEFAULT_SMOOTH_ITERATIONS,
    obstacle_count: int = DEFAULT_OBSTACLE_COUNT,
) -> CaveGrid:
    return generate_grid(GenerationParameters(
        width=width,
        height=height,
        seed=seed,
        wall_probability=wall_probability,
        smooth_iterations=smooth_iterations,
        obstacle_count=obstacle_count,
    ))
