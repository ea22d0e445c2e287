import pytest
from cavetown.grid import CaveGrid
from cavetown.tiles import OPEN, WALL, glyph_for, cell_for_glyph, is_wall

def test_create_is_all_open():
    grid, rng = CaveGrid.create(7, 4, seed=3)
    assert (grid.width, grid.height) == (7, 4)
    assert grid.buf == [OPEN] * 28
    assert rng.seed == 3

def test_out_of_bounds_reads_as_wall():
    for w, h in [(1, 1), (3, 2), (10, 10)]:
        g = CaveGrid.empty(w, h)
        for x in range(-3, w + 3):
            for y in range(-3, h + 3):
                v = g.cell_at(x, y)
                if 0 <= x < w and 0 <= y < h:
                    assert v == OPEN
                else:
                    assert v == WALL

def test_set_and_rows_row_major():
    g = CaveGrid.empty(3, 2)
    g.set(2, 0, WALL)
    g.set(0, 1, WALL)
    assert g.rows() == [[0, 0, 1], [1, 0, 0]]
    assert g.wall_count() == 2

def test_set_out_of_bounds_raises():
    g = CaveGrid.empty(3, 3)
    for x, y in [(-1, 0), (3, 0), (0, 3)]:
        with pytest.raises(IndexError):
            g.set(x, y, WALL)

def test_copy_is_independent():
    g = CaveGrid.empty(2, 2)
    c = g.copy()
    c.set(0, 0, WALL)
    assert g.get(0, 0) == OPEN

def test_from_rows_rejects_ragged():
    with pytest.raises(ValueError):
        CaveGrid.from_rows([[0, 1], [1]])

def test_glyphs():
    assert glyph_for(WALL) == "#" and glyph_for(OPEN) == "."
    assert cell_for_glyph("#") == WALL and cell_for_glyph(".") == OPEN

def test_is_wall():
    assert is_wall(WALL) and not is_wall(OPEN)
    g = CaveGrid.from_rows([[1, 0], [0, 1]])
    assert [is_wall(g.get(x, 0)) for x in (-1, 0, 1, 2)] == [True, True, False, True]
