"""
editsim.distance._initialize — shared types for the distance metrics.
"""

from __future__ import annotations


class LengthMismatchError(ValueError):
    """Raised by Hamming scorers when the two sequences differ in length.

    Both lengths are kept on the exception so callers can decide whether to
    skip the pair or retry with ``pad=True``.
    """

    def __init__(self, len1: int, len2: int) -> None:
        super().__init__(
            f"Hamming distance requires sequences of equal length, got {len1} and {len2}"
        )
        self.len1 = len1
        self.len2 = len2

    def __reduce__(self) -> tuple[type[LengthMismatchError], tuple[int, int]]:
        return type(self), (self.len1, self.len2)


__all__ = ["LengthMismatchError"]
