from .seq import ExactSeq, Repeat, Seq

__all__ = ("ExactSeq", "Repeat", "Seq")
