import importlib.util
import os

import pytest
from cavetown.grid import CaveGrid
from cavetown.render.image import CELL_COLORS, BACKGROUND, render_image, render_png
from cavetown.tiles import OPEN, WALL

def test_image_size_and_colors():
    g = CaveGrid.from_rows([[1, 0, 1, 1], [0, 0, 0, 1], [1, 1, 1, 1]])
    img = render_image(g, tile_size=2)
    assert img.size == (8, 6)
    assert img.getpixel((0, 0)) == CELL_COLORS[WALL]
    assert img.getpixel((3, 1)) == CELL_COLORS[OPEN]
    assert img.getpixel((1, 3)) == CELL_COLORS[OPEN]

def test_margin_is_transparent():
    g = CaveGrid.empty(2, 2)
    img = render_image(g, tile_size=3, margin=1)
    assert img.size == (8, 8)
    assert img.getpixel((0, 0)) == BACKGROUND
    assert img.getpixel((1, 1)) == CELL_COLORS[OPEN]

def test_render_png_writes_file(tmp_path):
    out = tmp_path / "nested" / "cave.png"
    render_png(CaveGrid.empty(5, 4, fill=WALL), str(out), tile_size=4)
    assert out.exists()

def load_render_tool():
    path = os.path.join(os.path.dirname(__file__), "..", "tools", "render_grid.py")
    spec = importlib.util.spec_from_file_location("render_grid", path)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod

def test_render_tool_reports_malformed_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"width": 1, "height": 1, "grid": 5}')
    with pytest.raises(SystemExit, match="bad.json"):
        load_render_tool().main([str(bad), "--outdir", str(tmp_path / "png")])

def test_render_tool_accepts_text(tmp_path):
    src = tmp_path / "cave.txt"
    src.write_text("###\n#.#\n###\n")
    load_render_tool().main([str(src), "--outdir", str(tmp_path / "png"), "--tile", "2"])
    assert (tmp_path / "png" / "cave.png").exists()
