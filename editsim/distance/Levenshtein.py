"""editsim.distance.Levenshtein"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any

from editsim.utils import conv_sequences, strip_common_affix


def _distance(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> int:
    s1, s2 = strip_common_affix(s1, s2)
    # the row runs over the shorter sequence
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    if not s2:
        return len(s1)

    prev = list(range(len(s2) + 1))
    for i, ch1 in enumerate(s1, 1):
        curr = [i]
        for j, ch2 in enumerate(s2, 1):
            curr.append(
                min(
                    prev[j] + 1,
                    curr[j - 1] + 1,
                    prev[j - 1] + (ch1 != ch2),
                )
            )
        prev = curr
    return prev[-1]


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | None = None,
) -> int:
    """
    Minimum number of insertions, deletions and substitutions turning *s1*
    into *s2*.

    >>> distance("kitten", "sitting")
    3
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
    """``1 - normalized_distance``; two empty inputs score ``1.0``."""
    norm = 1.0 - normalized_distance(s1, s2, processor=processor)
    return norm if score_cutoff is None or norm >= score_cutoff else 0.0


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
