from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Failure(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover (examples only)
        return self.message


@dataclass(frozen=True, slots=True)
class Reading:
    sensor: str
    hour: int
    celsius: float


def sample_readings() -> list[Reading]:  # pragma: no cover (examples only)
    return [
        Reading("north", 0, 11.5),
        Reading("north", 1, 10.9),
        Reading("south", 0, 14.2),
        Reading("south", 1, 13.8),
        Reading("east", 1, 12.1),
    ]


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    main()
