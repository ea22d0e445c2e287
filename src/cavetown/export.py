# src/cavetown/export.py
# JSON / TSV / text views of a finished cave. All I/O lives here, never in mapgen.

import csv
import json
import os
from typing import Any, Dict, List

from .config import GenerationParameters
from .grid import CaveGrid
from .tiles import cell_for_glyph, glyph_for


def grid_to_dict(grid: CaveGrid) -> Dict[str, Any]:
    return {"width": grid.width, "height": grid.height, "grid": grid.rows()}


def grid_from_dict(data: Dict[str, Any]) -> CaveGrid:
    if not isinstance(data, dict):
        raise ValueError("not a cave document: expected a JSON object")
    try:
        width, height, rows = data["width"], data["height"], data["grid"]
    except KeyError as e:
        raise ValueError(f"not a cave document: missing {e}") from e
    if type(width) is not int or type(height) is not int:
        raise ValueError("width and height must be integers")
    if not isinstance(rows, list) or any(not isinstance(r, list) for r in rows):
        raise ValueError("grid must be a list of rows")
    if len(rows) != height or any(len(r) != width for r in rows):
        raise ValueError(f"expected {height} rows of {width} columns")
    for r in rows:
        for v in r:
            if type(v) is not int or v not in (0, 1):
                raise ValueError(f"cells must be 0 or 1, got {v!r}")
    return CaveGrid.from_rows(rows)



def dumps(grid: CaveGrid) -> str:
    """
    Same layout the original exporter wrote: two-space indent, one row per
    line, no spaces inside a row.
    """
    lines = [
        "{",
        f'  "width": {grid.width},',
        f'  "height": {grid.height},',
        '  "grid": [',
    ]
    rows = grid.rows()
    for y, row in enumerate(rows):
        sep = "" if y == len(rows) - 1 else ","
        lines.append("    [" + ",".join(str(v) for v in row) + "]" + sep)
    lines.append("  ]")
    lines.append("}")
    return "\n".join(lines) + "\n"


def save_json(grid: CaveGrid, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(dumps(grid))


def load_json(path: str) -> CaveGrid:
    with open(path, encoding="utf-8") as f:
        return grid_from_dict(json.load(f))


def write_tsv(grid: CaveGrid, path: str) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t", lineterminator="\n")
        for r in grid.rows():
            w.writerow(r)


def read_tsv(path: str) -> CaveGrid:
    rows: List[List[int]] = []
    with open(path, encoding="utf-8") as f:
        for line in f:
            line = line.rstrip("\n")
            if not line:
                continue
            rows.append([int(x) for x in line.split("\t")])
    return CaveGrid.from_rows(rows)


def render_text(grid: CaveGrid) -> str:
    """'#' for wall, '.' for open, one line per row."""
    return "".join(
        "".join(glyph_for(v) for v in row) + "\n" for row in grid.rows()
    )


def parse_text(text: str) -> CaveGrid:
    """Inverse of render_text; blank lines are ignored."""
    rows = [[cell_for_glyph(ch) for ch in line] for line in text.splitlines() if line]
    return CaveGrid.from_rows(rows)


def fixture_name(params: GenerationParameters) -> str:
    """TSV name carrying every generation input, e.g. w50_h25_s42_p45_i5_o8.tsv."""
    pct = int(round(params.wall_probability * 100))
    return (f"w{params.width}_h{params.height}_s{params.seed}"
            f"_p{pct}_i{params.smooth_iterations}_o{params.obstacle_count}.tsv")


def load_grid_file(path: str) -> CaveGrid:
    """Load .json (emit), .tsv (golden) or .txt (print) by extension."""
    ext = os.path.splitext(path)[1].lower()
    if ext == ".json":
        return load_json(path)
    if ext == ".tsv":
        return read_tsv(path)
    if ext == ".txt":
        with open(path, encoding="utf-8") as f:
            return parse_text(f.read())
    raise ValueError(f"unsupported cave file type {ext!r}")
