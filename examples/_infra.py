from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Row:
    key: str
    value: str


def _empty_rows() -> dict[str, list[Row]]:
    return {}


@dataclass(slots=True)
class FakeTable:
    """Table that yields rows lazily and counts how many it produced."""

    name: str
    rows: dict[str, list[Row]] = field(default_factory=_empty_rows)
    produced: int = 0

    def scan(self, key: str) -> Iterator[Row]:
        for row in self.rows.get(key, []):
            self.produced += 1
            yield row


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], None]) -> None:  # pragma: no cover (examples only)
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    main()
