"""
Lift helpers with semantic namespaces.

Supports two import styles:
    from lazyseq import lift as L   # Recommended
    from lazyseq import lift        # Explicit

Architecture:
- L.up.*    - подъем iterable в ленивую последовательность
- L.down.*  - опускание последовательности в значение

Examples:
    from lazyseq import lift as L

    seq = L.up.from_iter(rows).or_else(L.up.of(default_row))
    rows = L.down.to_list(seq)
    head = L.down.first(seq)
"""

from __future__ import annotations

from . import down, up

# Most common functions in root for easy access
from .down import first, to_list
from .up import empty, from_iter, of, once, repeat

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "from_iter",
    "of",
    "once",
    "empty",
    "repeat",
    # Down
    "to_list",
    "first",
)
