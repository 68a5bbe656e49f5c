"""
editsim.distance — edit distance and similarity metrics.
"""

from __future__ import annotations

from . import (  # noqa: F401
    OSA,
    DamerauLevenshtein,
    Hamming,
    Jaro,
    JaroWinkler,
    Levenshtein,
)
from ._initialize import LengthMismatchError

__all__ = [
    "LengthMismatchError",
    "DamerauLevenshtein",
    "Hamming",
    "Jaro",
    "JaroWinkler",
    "Levenshtein",
    "OSA",
]
