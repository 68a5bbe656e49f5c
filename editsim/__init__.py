"""
editsim — string similarity and edit distance metrics.
"""

from __future__ import annotations

import logging

from . import distance, metrics, process, utils
from .distance import LengthMismatchError
from .metrics import (
    damerau_levenshtein,
    damerau_levenshtein_against_collection,
    hamming,
    hamming_against_collection,
    jaro,
    jaro_against_collection,
    jaro_winkler,
    jaro_winkler_against_collection,
    levenshtein,
    levenshtein_against_collection,
    normalized_damerau_levenshtein,
    normalized_damerau_levenshtein_against_collection,
    normalized_levenshtein,
    normalized_levenshtein_against_collection,
    osa_distance,
    osa_distance_against_collection,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"

__all__ = [
    "distance",
    "metrics",
    "process",
    "utils",
    "LengthMismatchError",
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
    "__version__",
]
