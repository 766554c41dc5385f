"""
Lazy sequence combinators.

Building blocks for composing forward-only, destructive Python iterators
without evaluating them eagerly.

Architecture:
- SeqBase implements the full contract (next, size_hint, fold, nth, last,
  count) on top of __next__; subclasses accelerate the bulk operations
- FallbackSeq / or_else: first source if non-empty, otherwise the second
- lift.up / lift.down: get into and out of lazy sequences
"""

import logging

# Core types
from ._types import ExactSizeSeq, Folder, LazySeq
from .base import SeqBase
from .sizing import SizeHint

# Internal helpers (for custom sequences)
from . import _helpers

# Lift helpers
from . import lift
from .lift import empty, first, from_iter, of, once, repeat, to_list

# Collection adapters
from .collection import ExactSeq, Repeat, Seq

# Control flow
from .control import ExactFallbackSeq, FallbackSeq, State, or_else, or_else_chain

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "ExactSizeSeq",
    "Folder",
    "LazySeq",
    "SeqBase",
    "SizeHint",
    # Internal helpers (for custom sequences)
    "_helpers",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "empty",
    "first",
    "from_iter",
    "of",
    "once",
    "repeat",
    "to_list",
    # Collection
    "ExactSeq",
    "Repeat",
    "Seq",
    # Control
    "ExactFallbackSeq",
    "FallbackSeq",
    "State",
    "or_else",
    "or_else_chain",
)
