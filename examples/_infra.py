from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def show(label: str, value: object) -> None:  # pragma: no cover (examples only)
    print(f"{label}: {value}")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
