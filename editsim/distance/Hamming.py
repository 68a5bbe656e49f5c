"""editsim.distance.Hamming"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from editsim.distance._initialize import LengthMismatchError
from editsim.utils import conv_sequences


def _hamming(s1: Any, s2: Any, pad: bool) -> tuple[int, int]:
    """Return ``(mismatches, max_len)``."""
    len1, len2 = len(s1), len(s2)
    if len1 != len2 and not pad:
        raise LengthMismatchError(len1, len2)
    dist = abs(len1 - len2)
    for a, b in zip(s1, s2):
        if a != b:
            dist += 1
    return dist, max(len1, len2)


def distance(
    s1: Any,
    s2: Any,
    *,
    pad: bool = False,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Number of positions at which *s1* and *s2* differ.

    Raises
    ------
    LengthMismatchError
        If the sequences differ in length and *pad* is false. With
        ``pad=True`` every surplus item of the longer sequence counts as a
        mismatch.
    """
    s1, s2 = conv_sequences(s1, s2, processor)
    dist, _ = _hamming(s1, s2, pad)
    return dist if score_cutoff is None or dist <= score_cutoff else score_cutoff + 1


def similarity(
    s1: Any,
    s2: Any,
    *,
    pad: bool = False,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """Number of positions at which *s1* and *s2* agree."""
    s1, s2 = conv_sequences(s1, s2, processor)
    dist, max_len = _hamming(s1, s2, pad)
    sim = max_len - dist
    return sim if score_cutoff is None or sim >= score_cutoff else 0


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    pad: bool = False,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Mismatch count divided by the longer length; ``0.0`` for two empty inputs."""
    s1, s2 = conv_sequences(s1, s2, processor)
    dist, max_len = _hamming(s1, s2, pad)
    norm = dist / max_len if max_len else 0.0
    return norm if score_cutoff is None or norm <= score_cutoff else 1.0


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    pad: bool = False,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """``1 - normalized_distance``."""
    norm = 1.0 - normalized_distance(s1, s2, pad=pad, processor=processor)
    return norm if score_cutoff is None or norm >= score_cutoff else 0.0


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
