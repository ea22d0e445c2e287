from dataclasses import dataclass, replace

# Defaults of the original CaveGenerator (generate() and main()).
DEFAULT_WIDTH, DEFAULT_HEIGHT = 50, 25
DEFAULT_SEED = 42
DEFAULT_WALL_PROBABILITY = 0.45
DEFAULT_SMOOTH_ITERATIONS = 5
DEFAULT_OBSTACLE_COUNT = 8

# Obstacle centres are drawn from [MARGIN, size - MARGIN] on both axes.
OBSTACLE_MARGIN = 5
OBSTACLE_MIN_SIZE, OBSTACLE_MAX_SIZE = 1, 3
MIN_OBSTACLE_GRID = 2 * OBSTACLE_MARGIN


class InvalidParameter(ValueError):
    """Generation parameters outside their documented domain."""


def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


@dataclass(frozen=True)
class GenerationParameters:
    width: int
    height: int
    seed: int = DEFAULT_SEED
    wall_probability: float = DEFAULT_WALL_PROBABILITY
    smooth_iterations: int = DEFAULT_SMOOTH_ITERATIONS
    obstacle_count: int = DEFAULT_OBSTACLE_COUNT

    def validate(self) -> "GenerationParameters":
        """Raise InvalidParameter on the first bad field; return self otherwise."""
        for name in ("width", "height"):
            v = getattr(self, name)
            if not _is_int(v) or v <= 0:
                raise InvalidParameter(f"{name} must be a positive int, got {v!r}")
        if not _is_int(self.seed) or self.seed < 0:
            raise InvalidParameter(f"seed must be a non-negative int, got {self.seed!r}")
        p = self.wall_probability
        if isinstance(p, bool) or not isinstance(p, (int, float)) or not (0.0 <= p <= 1.0):
            raise InvalidParameter(f"wall_probability must be in [0, 1], got {p!r}")
        if not _is_int(self.smooth_iterations) or self.smooth_iterations < 0:
            raise InvalidParameter(
                f"smooth_iterations must be >= 0, got {self.smooth_iterations!r}")
        if not _is_int(self.obstacle_count) or self.obstacle_count < 0:
            raise InvalidParameter(
                f"obstacle_count must be >= 0, got {self.obstacle_count!r}")
        if self.obstacle_count and (
            self.width < MIN_OBSTACLE_GRID or self.height < MIN_OBSTACLE_GRID
        ):
            raise InvalidParameter(
                f"obstacles need a grid of at least {MIN_OBSTACLE_GRID}x{MIN_OBSTACLE_GRID}, "
                f"got {self.width}x{self.height}")
        return self

    def with_seed(self, seed: int) -> "GenerationParameters":
        return replace(self, seed=seed)
