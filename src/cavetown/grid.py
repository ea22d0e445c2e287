from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .rng import CaveRandom
from .tiles import OPEN, WALL, is_wall


@dataclass
class CaveGrid:
    width: int
    height: int
    buf: List[int]

    def __post_init__(self):
        if len(self.buf) != self.width * self.height:
            raise ValueError(
                f"buffer holds {len(self.buf)} cells, expected {self.width}x{self.height}")

    @classmethod
    def empty(cls, width: int, height: int, fill: int = OPEN) -> "CaveGrid":
        return cls(width, height, [fill] * (width * height))

    @classmethod
    def create(cls, width: int, height: int, seed: int) -> Tuple["CaveGrid", CaveRandom]:
        """All-open grid plus the random source every stage will share."""
        return cls.empty(width, height), CaveRandom(seed)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "CaveGrid":
        height = len(rows)
        width = len(rows[0]) if height else 0
        if any(len(r) != width for r in rows):
            raise ValueError("rows must all have the same length")
        buf = [WALL if v else OPEN for r in rows for v in r]
        return cls(width, height, buf)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        # Anything off the map reads as rock.
        if not self.in_bounds(x, y):
            return WALL
        return self.buf[self.idx(x, y)]

    def cell_at(self, x: int, y: int) -> int:
        return self.get(x, y)

    def set(self, x: int, y: int, v: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")
        self.buf[self.idx(x, y)] = v

    def copy(self) -> "CaveGrid":
        return CaveGrid(self.width, self.height, self.buf[:])

    def swap_in(self, other: "CaveGrid") -> None:
        """Adopt other's cells (same dimensions) as this grid's state."""
        if (other.width, other.height) != (self.width, self.height):
            raise ValueError("cannot swap in a grid of different dimensions")
        self.buf = other.buf

    def rows(self) -> List[List[int]]:
        w = self.width
        return [self.buf[y * w:(y + 1) * w] for y in range(self.height)]

    def wall_count(self) -> int:
        return sum(1 for v in self.buf if is_wall(v))
