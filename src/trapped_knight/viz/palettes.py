from __future__ import annotations

PALETTES: dict[str, list[str]] = {
    "basic": ["red", "orange", "yellow", "green", "blue", "purple"],
    "vw": [f"#{c}" for c in ("ffcfea", "feffbe", "cbffe6", "afe9ff", "bfb9ff")],
    "vwWhite": [f"#{c}" for c in ("ffffff", "feffbe", "cbffe6", "afe9ff", "bfb9ff")],
    "vw2": [f"#{c}" for c in ("ff6adf", "c774e8", "ad8cff", "87958e", "94d0ff")],
    "vw3": [f"#{c}" for c in ("34e1fb", "63bcfb", "8dbafb", "fb93fc", "b9a1fb")],
}


def color_bands(n_segments: int, palette: list[str]) -> list[str]:
    """Color per path segment: the path is cut into len(palette) consecutive bands."""
    if not palette:
        raise ValueError("palette must not be empty")
    per_color = max(1, n_segments // len(palette))
    return [palette[(i // per_color) % len(palette)] for i in range(n_segments)]
