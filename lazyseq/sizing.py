"""
SizeHint - оценка оставшейся длины
==================================
"""

from __future__ import annotations

import sys
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SizeHint:
    """
    Bounds on how many elements a lazy sequence will still yield.

    `lower` is never more than the true remaining count; `upper`, when known,
    is never less. Computing a hint must not consume the sequence.

    Example:
        match seq.size_hint():
            case SizeHint(_, 0):
                ...  # definitely empty
            case SizeHint(lower, upper) if lower == upper:
                ...  # exact
    """

    lower: int
    upper: int | None = None

    def __post_init__(self) -> None:
        if self.lower < 0:
            raise ValueError(f"SizeHint.lower must be >= 0, got {self.lower}")
        if self.upper is not None and self.upper < self.lower:
            raise ValueError(
                f"SizeHint.upper must be >= lower ({self.lower}), got {self.upper}"
            )

    @staticmethod
    def unknown() -> SizeHint:
        """Nothing is known: may be empty, may be infinite."""
        return SizeHint(0, None)

    @staticmethod
    def exact(n: int) -> SizeHint:
        """Exactly n elements remain."""
        return SizeHint(n, n)

    @staticmethod
    def infinite() -> SizeHint:
        """Never ends. Lower bound saturates at sys.maxsize."""
        return SizeHint(sys.maxsize, None)

    @property
    def is_exact(self) -> bool:
        return self.upper == self.lower


__all__ = ("SizeHint",)
