"""editsim.distance.Jaro"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any

from editsim.utils import conv_sequences


def _similarity(s1: Sequence[Hashable], s2: Sequence[Hashable]) -> float:
    len1, len2 = len(s1), len(s2)
    if not len1 and not len2:
        return 1.0
    if not len1 or not len2:
        return 0.0
    if s1 == s2:
        return 1.0

    window = max(0, max(len1, len2) // 2 - 1)
    flags1 = [False] * len1
    flags2 = [False] * len2

    matches = 0
    for i, ch1 in enumerate(s1):
        lo = max(0, i - window)
        hi = min(len2, i + window + 1)
        for j in range(lo, hi):
            if not flags2[j] and s2[j] == ch1:
                flags1[i] = flags2[j] = True
                matches += 1
                break

    if not matches:
        return 0.0

    # walk the matched items of both sides in order
    out_of_order = 0
    j = 0
    for i, ch1 in enumerate(s1):
        if not flags1[i]:
            continue
        while not flags2[j]:
            j += 1
        if ch1 != s2[j]:
            out_of_order += 1
        j += 1
    transpositions = out_of_order / 2

    return (
        matches / len1 + matches / len2 + (matches - transpositions) / matches
    ) / 3.0


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Jaro similarity in ``[0.0, 1.0]``.

    Two empty inputs score ``1.0``; a single empty input scores ``0.0``.

    >>> round(similarity("Friedrich Nietzsche", "Jean-Paul Sartre"), 3)
    0.392
    """
    s1, s2 = conv_sequences(s1, s2, processor)
    sim = _similarity(s1, s2)
    return sim if score_cutoff is None or sim >= score_cutoff else 0.0


def distance(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """``1 - similarity``."""
    dist = 1.0 - similarity(s1, s2, processor=processor)
    return dist if score_cutoff is None or dist <= score_cutoff else 1.0


# Jaro is already bounded to [0, 1]
normalized_similarity = similarity
normalized_distance = distance


__all__ = [
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
