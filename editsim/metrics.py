"""
editsim.metrics — flat functional interface.

Each pairwise function is the corresponding scorer from
:mod:`editsim.distance`; each ``*_against_collection`` function scores one
query against an ordered collection of candidates and returns the scores in
the same order.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .distance import OSA, DamerauLevenshtein, Hamming, Jaro, JaroWinkler, Levenshtein
from .process import score_each

hamming = Hamming.distance
levenshtein = Levenshtein.distance
normalized_levenshtein = Levenshtein.normalized_similarity
osa_distance = OSA.distance
damerau_levenshtein = DamerauLevenshtein.distance
normalized_damerau_levenshtein = DamerauLevenshtein.normalized_similarity
jaro = Jaro.similarity
jaro_winkler = JaroWinkler.similarity


def hamming_against_collection(
    query: Any, candidates: Iterable[Any], *, workers: int = 1
) -> list[int]:
    """Raises :class:`LengthMismatchError` if any candidate differs in length."""
    return score_each(query, candidates, scorer=hamming, workers=workers)


def levenshtein_against_collection(
    query: Any, candidates: Iterable[Any], *, workers: int = 1
) -> list[int]:
    return score_each(query, candidates, scorer=levenshtein, workers=workers)


def normalized_levenshtein_against_collection(
    query: Any, candidates: Iterable[Any], *, workers: int = 1
) -> list[float]:
    return score_each(query, candidates, scorer=normalized_levenshtein, workers=workers)


def osa_distance_against_collection(
    query: Any, candidates: Iterable[Any], *, workers: int = 1
) -> list[int]:
    return score_each(query, candidates, scorer=osa_distance, workers=workers)


def damerau_levenshtein_against_collection(
    query: Any, candidates: Iterable[Any], *, workers: int = 1
) -> list[int]:
    return score_each(query, candidates, scorer=damerau_levenshtein, workers=workers)


def normalized_damerau_levenshtein_against_collection(
    query: Any, candidates: Iterable[Any], *, workers: int = 1
) -> list[float]:
    return score_each(
        query, candidates, scorer=normalized_damerau_levenshtein, workers=workers
    )


def jaro_against_collection(
    query: Any, candidates: Iterable[Any], *, workers: int = 1
) -> list[float]:
    return score_each(query, candidates, scorer=jaro, workers=workers)


def jaro_winkler_against_collection(
    query: Any, candidates: Iterable[Any], *, workers: int = 1
) -> list[float]:
    return score_each(query, candidates, scorer=jaro_winkler, workers=workers)


__all__ = [
    "hamming",
    "levenshtein",
    "normalized_levenshtein",
    "osa_distance",
    "damerau_levenshtein",
    "normalized_damerau_levenshtein",
    "jaro",
    "jaro_winkler",
    "hamming_against_collection",
    "levenshtein_against_collection",
    "normalized_levenshtein_against_collection",
    "osa_distance_against_collection",
    "damerau_levenshtein_against_collection",
    "normalized_damerau_levenshtein_against_collection",
    "jaro_against_collection",
    "jaro_winkler_against_collection",
]
