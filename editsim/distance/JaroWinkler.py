"""
editsim.distance.JaroWinkler

Jaro similarity boosted by the length of the common prefix. The prefix is
not capped at four items as in Winkler's definition; instead the boost
multiplier ``prefix_len * PREFIX_WEIGHT`` is capped at ``1.0`` so that the
result never exceeds ``1.0``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from editsim.distance.Jaro import _similarity as _jaro_similarity
from editsim.utils import common_prefix_length, conv_sequences

PREFIX_WEIGHT: float = 0.1


def similarity(
    s1: Any,
    s2: Any,
    *,
    processor: Callable[..., Any] | None = None,
    score_cutoff: float | None = None,
) -> float:
    """
    Jaro-Winkler similarity in ``[0.0, 1.0]``.

    >>> round(similarity("cheeseburger", "cheese fries"), 3)
    0.911
    """
    s1, s2 = conv_sequences(s1, s2, processor)
    sim = _jaro_similarity(s1, s2)
    boost = min(common_prefix_length(s1, s2) * PREFIX_WEIGHT, 1.0)
    sim = min(sim + boost * (1.0 - sim), 1.0)
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


normalized_similarity = similarity
normalized_distance = distance


__all__ = [
    "PREFIX_WEIGHT",
    "distance",
    "similarity",
    "normalized_distance",
    "normalized_similarity",
]
