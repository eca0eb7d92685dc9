from __future__ import annotations

import json
import logging

import pytest

from trapped_knight.cli import main


def test_walk_prints_report(capsys):
    assert main(["walk", "--size", "4"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["steps"] == 9
    assert report["final_value"] == 8


def test_walk_sequence(capsys):
    assert main(["walk", "--size", "4", "--sequence"]) == 0
    out = capsys.readouterr().out
    assert out.strip().splitlines()[-1] == "1, 10, 3, 6, 9, 4, 7, 2, 5, 8"


def test_walk_uses_config_file(tmp_path, capsys):
    cfg = tmp_path / "knight.yaml"
    cfg.write_text("board:\n  size: 4\n  start: [1, 1]\n")
    assert main(["walk", "--config", str(cfg)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["size"] == 4
    assert report["start"] == [1, 1]
    assert report["start_value"] == 5


def test_board_prints_grid(capsys):
    assert main(["board", "--size", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[2].split() == ["0", "6", "1", "2", "0"]
    assert lines[3].split() == ["0", "7", "8", "9", "10"]


def test_bad_size_reports_error(capsys):
    assert main(["walk", "--size", "5"]) == 2
    assert "error:" in capsys.readouterr().err


def test_out_of_bounds_start_reports_error(capsys):
    assert main(["walk", "--size", "4", "--start", "7", "0"]) == 2
    assert "error:" in capsys.readouterr().err


def test_plot_writes_image(tmp_path, capsys):
    out = tmp_path / "knight.png"
    assert main(["plot", "--size", "20", "--palette", "vw2", "--output", str(out)]) == 0
    assert out.exists() and out.stat().st_size > 0
    assert "Wrote" in capsys.readouterr().out


@pytest.mark.parametrize("text", ["plot:\n  line_width: thick\n", "board: 4\n"])
def test_bad_config_file_reports_error(tmp_path, capsys, text):
    cfg = tmp_path / "knight.yaml"
    cfg.write_text(text)
    assert main(["walk", "--size", "4", "--config", str(cfg)]) == 2
    assert "error:" in capsys.readouterr().err


def test_walk_sequence_walks_once(caplog, capsys):
    with caplog.at_level(logging.INFO, logger="trapped_knight.core.walker"):
        assert main(["walk", "--size", "4", "--sequence"]) == 0
    trapped = [r for r in caplog.records if r.name == "trapped_knight.core.walker"]
    assert len(trapped) == 1
    report = json.loads(capsys.readouterr().out.rsplit("}", 1)[0] + "}")
    assert report["max_value_at"] == [3, 4]
