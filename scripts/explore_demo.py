from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from trapped_knight import explore_trapped  # noqa: E402


def main() -> None:
    for size in (4, 20, 60, 100):
        print(explore_trapped(size))


if __name__ == "__main__":
    main()
