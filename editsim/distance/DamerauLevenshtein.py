"""
editsim.distance.DamerauLevenshtein — unrestricted Damerau-Levenshtein
distance.

Unlike :mod:`editsim.distance.OSA`, transposed substrings may be edited
again, so the result satisfies the triangle inequality.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any

from editsim.utils import conv_sequences


def _distance(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    len1, len2 = len(s1), len(s2)
    if not len1:
        return len2
    if not len2:
        return len1

    # Matrix is offset by one: row/column 0 hold the sentinel max_dist,
    # d[i + 1][j + 1] is the distance between s1[:i] and s2[:j].
    max_dist = len1 + len2
    d = [[max_dist] * (len2 + 2) for _ in range(len1 + 2)]
    for i in range(len1 + 1):
        d[i + 1][1] = i
    for j in range(len2 + 1):
        d[1][j + 1] = j

    # item -> last row of s1 it was seen in
    last_row: dict[Hashable, int] = {}
    for i in range(1, len1 + 1):
        ch1 = s1[i - 1]
        last_match_col = 0
        for j in range(1, len2 + 1):
            ch2 = s2[j - 1]
            k = last_row.get(ch2, 0)
            col = last_match_col
            if ch1 == ch2:
                cost = 0
                last_match_col = j
            else:
                cost = 1
            d[i + 1][j + 1] = min(
                d[i][j] + cost,
                d[i + 1][j] + 1,
                d[i][j + 1] + 1,
                d[k][col] + (i - k - 1) + 1 + (j - col - 1),
            )
        last_row[ch1] = i

    return d[len1 + 1][len2 + 1]


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Minimum number of insertions, deletions, substitutions and transpositions
    turning *s1* into *s2*.

    >>> distance("ca", "abc")
    2
    """
    s1, s2 = conv_sequences(s1, s2, processor)
    dist = _distance(s1, s2)
    return dist if score_cutoff is None or dist <= score_cutoff else score_cutoff + 1


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """``max(len(s1), len(s2)) - distance``."""
    s1, s2 = conv_sequences(s1, s2, processor)
    sim = max(len(s1), len(s2)) - _distance(s1, s2)
    return sim if score_cutoff is None or sim >= score_cutoff else 0


def normalized_distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """Distance divided by the longer length; ``0.0`` for two empty inputs."""
    s1, s2 = conv_sequences(s1, s2, processor)
    max_len = max(len(s1), len(s2))
    norm = _distance(s1, s2) / max_len if max_len else 0.0
    return norm if score_cutoff is None or norm <= score_cutoff else 1.0


def normalized_similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    ``1 - distance / max(len(s1), len(s2))``; two empty inputs score ``1.0``.

    >>> round(normalized_similarity("levenshtein", "löwenbräu"), 3)
    0.273
    """
    norm = 1.0 - normalized_distance(s1, s2, processor=processor)
    return norm if score_cutoff is None or norm >= score_cutoff else 0.0


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
