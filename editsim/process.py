"""
editsim.process — batch scoring and extraction utilities.

Every helper here is a thin map over a pairwise scorer from
:mod:`editsim.distance`, so batch results always agree with the single-pair
functions.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from .utils import as_sequence

logger = logging.getLogger(__name__)


def _resolve_scorer(
    scorer: Callable[..., Any] | None,
) -> tuple[Callable[..., Any], bool]:
    """Resolve a scorer callable to ``(scorer, lower_is_better)``.

    Scorers whose ``__name__`` mentions "distance" rank ascending; anything
    else is treated as a similarity and ranks descending.
    """
    from .distance import JaroWinkler

    _scorer = scorer if scorer is not None else JaroWinkler.similarity
    if not callable(_scorer):
        raise TypeError(f"scorer must be callable, got {type(_scorer).__name__}")
    scorer_name = getattr(_scorer, "__name__", "unknown").lower()
    return _scorer, "distance" in scorer_name


def _resolve_workers(workers: int) -> int:
    if workers == 0:
        raise ValueError("workers must be a positive integer or -1")
    if workers < 0:
        return os.cpu_count() or 1
    return workers


def score_each(
    query: Any,
    choices: Iterable[Any],
    *,
    scorer: Callable[..., Any],
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | float | None = None,
    workers: int = 1,
) -> list[Any]:
    """Score *query* against every element of *choices*.

    Returns one score per choice, in the order of *choices*. Each score is
    computed independently with *scorer*; with ``workers > 1`` (or ``-1``
    for one worker per CPU) the calls are spread over a thread pool.

    Any exception raised by *scorer* propagates and no partial result is
    returned.
    """
    if not callable(scorer):
        raise TypeError(f"scorer must be callable, got {type(scorer).__name__}")
    n_workers = _resolve_workers(workers)
    choices = list(choices)

    # the query is reused for every choice, so one-shot iterables are read once
    processed_query = as_sequence(processor(query) if processor is not None else query)
    kwargs: dict[str, Any] = {}
    if score_cutoff is not None:
        kwargs["score_cutoff"] = score_cutoff

    def _score(choice: Any) -> Any:
        if processor is not None:
            choice = processor(choice)
        return scorer(processed_query, choice, **kwargs)

    if n_workers == 1 or len(choices) < 2:
        return [_score(choice) for choice in choices]

    n_workers = min(n_workers, len(choices))
    logger.debug(
        "scoring %d choices with %s on %d workers",
        len(choices),
        getattr(scorer, "__qualname__", scorer),
        n_workers,
    )
    with ThreadPoolExecutor(max_workers=n_workers) as pool:
        return list(pool.map(_score, choices))


def extract(
    query: Any,
    choices: Iterable[Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    limit: int | None = 5,
    score_cutoff: int | float | None = None,
    workers: int = 1,
) -> list[tuple[Any, Any, int]]:
    """Return the best matches from *choices* for *query*.

    Results are ``(choice, score, index)`` tuples, best first. Ties keep the
    order of *choices*. The default scorer is
    :func:`editsim.distance.JaroWinkler.similarity`.
    """
    _scorer, lower_is_better = _resolve_scorer(scorer)
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    choices = list(choices)
    scores = score_each(
        query, choices, scorer=_scorer, processor=processor, workers=workers
    )

    results: list[tuple[Any, Any, int]] = []
    for idx, (choice, score) in enumerate(zip(choices, scores)):
        if score_cutoff is not None:
            if lower_is_better and score > score_cutoff:
                continue
            if not lower_is_better and score < score_cutoff:
                continue
        results.append((choice, score, idx))

    results.sort(key=lambda r: r[1], reverse=not lower_is_better)
    if limit is not None:
        results = results[:limit]
    return results


def extractOne(
    query: Any,
    choices: Iterable[Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    score_cutoff: int | float | None = None,
) -> tuple[Any, Any, int] | None:
    """Return the single best match or None."""
    results = extract(
        query,
        choices,
        scorer=scorer,
        processor=processor,
        limit=1,
        score_cutoff=score_cutoff,
    )
    return results[0] if results else None


def cdist(
    queries: Iterable[Any],
    choices: Iterable[Any],
    *,
    scorer: Callable[..., Any] | None = None,
    processor: Callable[..., Any] | None = None,
    dtype: Any = None,
    workers: int = 1,
) -> Any:
    """Compute a ``len(queries) x len(choices)`` score matrix. Requires numpy.

    When *dtype* is None numpy infers it from the scores (integers for edit
    distances, floats for normalized and Jaro scorers).
    """
    try:
        import numpy as np
    except ImportError as e:
        msg = "cdist requires numpy: pip install editsim[all]"
        raise ImportError(msg) from e

    _scorer, _ = _resolve_scorer(scorer)
    queries = list(queries)
    choices = list(choices)

    rows = [
        score_each(q, choices, scorer=_scorer, processor=processor, workers=workers)
        for q in queries
    ]
    matrix = np.array(rows, dtype=dtype)
    return matrix.reshape((len(queries), len(choices)))


__all__ = ["score_each", "extract", "extractOne", "cdist"]
