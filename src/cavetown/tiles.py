# Cell states and their text glyphs.

OPEN = 0
WALL = 1

WALL_GLYPH = "#"
OPEN_GLYPH = "."

def is_wall(cell: int) -> bool:
    return cell == WALL

def glyph_for(cell: int) -> str:
    return WALL_GLYPH if cell == WALL else OPEN_GLYPH

def cell_for_glyph(ch: str) -> int:
    if ch == WALL_GLYPH:
        return WALL
    if ch == OPEN_GLYPH:
        return OPEN
    raise ValueError(f"unknown cell glyph {ch!r}")
