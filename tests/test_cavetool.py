import importlib.util
import os

import pytest
from cavetown.export import load_json
from cavetown.mapgen.generator import generate_cave

TOOL = os.path.join(os.path.dirname(__file__), "..", "tools", "cavetool.py")

def load_tool():
    spec = importlib.util.spec_from_file_location("cavetool", TOOL)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod

def test_emit_writes_generated_cave(tmp_path, capsys):
    out = tmp_path / "cave.json"
    load_tool().main(["emit", "--width", "20", "--height", "12", "--seed", "3", "--out", str(out)])
    assert load_json(str(out)).buf == generate_cave(20, 12, seed=3).buf
    assert "Cave grid exported to" in capsys.readouterr().out

def test_print_renders_rows(capsys):
    load_tool().main(["print", "--width", "12", "--height", "10", "--seed", "9"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    assert lines[0] == "#" * 12

def test_golden_pack(tmp_path):
    load_tool().main(["golden", "--width", "15", "--height", "11", "--count", "3",
                      "--outdir", str(tmp_path)])
    assert sorted(os.listdir(tmp_path)) == [
        "w15_h11_s1_p45_i5_o8.tsv", "w15_h11_s2_p45_i5_o8.tsv", "w15_h11_s3_p45_i5_o8.tsv",
    ]

def test_invalid_parameters_exit(tmp_path):
    with pytest.raises(SystemExit, match="invalid parameters"):
        load_tool().main(["emit", "--width", "0", "--out", str(tmp_path / "x.json")])

def test_golden_regenerates_stored_fixture(tmp_path):
    load_tool().main(["golden", "--width", "50", "--height", "25", "--first-seed", "42",
                      "--count", "1", "--outdir", str(tmp_path)])
    name = "w50_h25_s42_p45_i5_o8.tsv"
    stored = os.path.join(os.path.dirname(__file__), "..", "data", "golden_caves", name)
    with open(stored, encoding="utf-8") as f:
        assert (tmp_path / name).read_text() == f.read()
