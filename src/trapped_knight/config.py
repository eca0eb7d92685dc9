from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from trapped_knight.core.board import Coord
from trapped_knight.core.errors import ConfigurationError
from trapped_knight.viz.palettes import PALETTES


@dataclass
class BoardConfig:
    size: int = 100
    start: Coord | None = None


@dataclass
class PlotConfig:
    palette: str = "vw"
    line_width: float = 8.0
    title: str | None = None


@dataclass
class Settings:
    board: BoardConfig = field(default_factory=BoardConfig)
    plot: PlotConfig = field(default_factory=PlotConfig)


def default_settings() -> Settings:
    return Settings()


def _load_file(path: Path) -> Dict[str, Any]:
    text = path.read_text()
    if path.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: top level must be a mapping")
    return data


def parse_start(raw: Any) -> Coord | None:
    if raw is None:
        return None
    if not isinstance(raw, (list, tuple)) or len(raw) != 2:
        raise ConfigurationError(f"start must be a [row, col] pair, got {raw!r}")
    try:
        return (int(raw[0]), int(raw[1]))
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"start must hold integers, got {raw!r}") from e


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    raw = data.get(name)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{name} section must be a mapping, got {raw!r}")
    return raw


def _parse_board(raw: Dict[str, Any]) -> BoardConfig:
    size = raw.get("size", 100)
    if isinstance(size, bool) or not isinstance(size, int):
        raise ConfigurationError(f"board.size must be an integer, got {size!r}")
    return BoardConfig(size=size, start=parse_start(raw.get("start")))


def _parse_plot(raw: Dict[str, Any]) -> PlotConfig:
    palette = str(raw.get("palette", "vw"))
    if palette not in PALETTES:
        raise ConfigurationError(f"unknown palette {palette!r}; choose from {sorted(PALETTES)}")
    line_width = raw.get("line_width", 8.0)
    try:
        line_width = float(line_width)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"plot.line_width must be a number, got {line_width!r}") from e
    return PlotConfig(
        palette=palette,
        line_width=line_width,
        title=raw.get("title"),
    )


def load_settings(path: str | Path) -> Settings:
    path = Path(path)
    data = _load_file(path)
    return Settings(
        board=_parse_board(_section(data, "board")),
        plot=_parse_plot(_section(data, "plot")),
    )
