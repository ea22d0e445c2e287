# src/cavetown/render/tileset.py
from __future__ import annotations
import os
import pygame
from functools import lru_cache
from typing import Tuple

from ..tiles import OPEN, WALL

ASSET_DIR = os.path.join("assets", "tiles")
TILE_NAMES = {WALL: "wall", OPEN: "open"}

def _path_candidates(cell: int) -> Tuple[str, ...]:
    name = TILE_NAMES.get(cell, str(cell))
    return (
        os.path.join(ASSET_DIR, f"{name}.png"),
        os.path.join(ASSET_DIR, f"tile_{cell}.png"),
    )

def _fallback_color(cell: int) -> Tuple[int, int, int, int]:
    if cell == WALL: return ( 80,  80,  80, 255)
    if cell == OPEN: return (220, 220, 220, 255)
    return (255, 0, 255, 255)   # unknown

class Tileset:
    """
    Cached cell surfaces for the viewer:
      - Uses assets/tiles/wall.png / open.png when present
      - Otherwise a flat-coloured square
      - view() returns a pygame.Surface of exactly (size, size)
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=8)
    def get(self, cell: int) -> pygame.Surface:
        for p in _path_candidates(cell):
            if os.path.exists(p):
                return pygame.image.load(p).convert_alpha()
        img = pygame.Surface((self.tile_size, self.tile_size), pygame.SRCALPHA)
        img.fill(_fallback_color(cell))
        return img

    @lru_cache(maxsize=64)
    def view(self, cell: int, size: int) -> pygame.Surface:
        base = self.get(cell)
        if base.get_size() == (size, size):
            return base
        return pygame.transform.scale(base, (size, size))
