"""
editsim.distance.OSA — optimal string alignment distance.

Levenshtein plus transposition of two adjacent items, with the restriction
that no substring is edited more than once. The result is therefore not a
metric: ``distance("ca", "abc") == 3`` although ``"ca" -> "ac" -> "abc"``
takes two steps.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any

from editsim.utils import conv_sequences, strip_common_affix


def _distance(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    s1, s2 = strip_common_affix(s1, s2)
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return len(s1)

    n = len(s2)
    prev2: list[int] = []
    prev = list(range(n + 1))
    for i in range(1, len(s1) + 1):
        ch1 = s1[i - 1]
        curr = [i] + [0] * n
        for j in range(1, n + 1):
            ch2 = s2[j - 1]
            best = min(
                prev[j] + 1,
                curr[j - 1] + 1,
                prev[j - 1] + (ch1 != ch2),
            )
            if i > 1 and j > 1 and ch1 == s2[j - 2] and s1[i - 2] == ch2:
                best = min(best, prev2[j - 2] + 1)
            curr[j] = best
        prev2, prev = prev, curr
    return prev[n]


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """Optimal string alignment distance between *s1* and *s2*."""
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
    """``1 - normalized_distance``; two empty inputs score ``1.0``."""
    norm = 1.0 - normalized_distance(s1, s2, processor=processor)
    return norm if score_cutoff is None or norm >= score_cutoff else 0.0


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
