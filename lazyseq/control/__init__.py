from .fallback import ExactFallbackSeq, FallbackSeq, State, or_else, or_else_chain

__all__ = (
    # Types
    "State",
    "FallbackSeq",
    "ExactFallbackSeq",
    # Sugar
    "or_else",
    "or_else_chain",
)
