"""Tests for editsim.process and the *_against_collection helpers."""

from __future__ import annotations

import pytest

import editsim
import editsim.process as process
from editsim.distance import Hamming, Jaro, JaroWinkler, Levenshtein

CANDIDATES = ["test", "test1", "test12", "test123", "", "tset"]


def _approx_list(values: list[float]) -> list[object]:
    return [pytest.approx(v, abs=1e-4) for v in values]


class TestAgainstCollection:
    def test_levenshtein(self) -> None:
        result = editsim.levenshtein_against_collection("test", CANDIDATES)
        assert result == [0, 1, 2, 3, 4, 2]

    def test_damerau_levenshtein(self) -> None:
        result = editsim.damerau_levenshtein_against_collection("test", CANDIDATES)
        assert result == [0, 1, 2, 3, 4, 1]

    def test_osa(self) -> None:
        result = editsim.osa_distance_against_collection("test", CANDIDATES)
        assert result == [0, 1, 2, 3, 4, 1]

    def test_jaro(self) -> None:
        result = editsim.jaro_against_collection("test", CANDIDATES)
        assert result == _approx_list([1.0, 0.933333, 0.888889, 0.857143, 0.0, 0.916667])

    def test_jaro_winkler(self) -> None:
        result = editsim.jaro_winkler_against_collection("test", CANDIDATES)
        assert result == _approx_list([1.0, 0.96, 0.933333, 0.914286, 0.0, 0.925])

    def test_normalized(self) -> None:
        result = editsim.normalized_levenshtein_against_collection("test", ["test", ""])
        assert result == [1.0, 0.0]
        result = editsim.normalized_damerau_levenshtein_against_collection("ab", ["ba"])
        assert result == [0.5]

    def test_hamming(self) -> None:
        result = editsim.hamming_against_collection("test", ["test", "tset", "best"])
        assert result == [0, 2, 1]

    def test_hamming_mismatch_propagates(self) -> None:
        with pytest.raises(editsim.LengthMismatchError):
            editsim.hamming_against_collection("test", ["test", "test1"])

    def test_hamming_mismatch_propagates_threaded(self) -> None:
        with pytest.raises(editsim.LengthMismatchError):
            editsim.hamming_against_collection("test", ["test", "test1"], workers=2)

    def test_empty_collection(self) -> None:
        assert editsim.levenshtein_against_collection("test", []) == []
        assert editsim.jaro_against_collection("test", [], workers=4) == []

    def test_single(self) -> None:
        assert editsim.levenshtein_against_collection("test", ["testy"]) == [1]
        assert editsim.damerau_levenshtein_against_collection("test", ["etst"]) == [1]

    def test_generator_input(self) -> None:
        result = editsim.levenshtein_against_collection("test", (c for c in CANDIDATES))
        assert result == [0, 1, 2, 3, 4, 2]

    def test_generator_query(self) -> None:
        for workers in (1, 4):
            result = editsim.levenshtein_against_collection(
                iter("abc"), ["abc", "abc", "abc"], workers=workers
            )
            assert result == [0, 0, 0]
            assert editsim.jaro_against_collection(
                (c for c in "abc"), ["abc", "abc"], workers=workers
            ) == [1.0, 1.0]

    def test_workers_preserve_order(self) -> None:
        candidates = [f"test{i}" for i in range(50)]
        expected = [Levenshtein.distance("test", c) for c in candidates]
        assert editsim.levenshtein_against_collection("test", candidates, workers=4) == expected
        assert editsim.levenshtein_against_collection("test", candidates, workers=-1) == expected


class TestScoreEach:
    def test_processor(self) -> None:
        scores = process.score_each(
            "HELLO",
            ["hello", "Hello!"],
            scorer=Levenshtein.distance,
            processor=editsim.utils.default_process,
        )
        assert scores == [0, 0]

    def test_score_cutoff(self) -> None:
        scores = process.score_each(
            "kitten", ["kitten", "sitting"], scorer=Levenshtein.distance, score_cutoff=1
        )
        assert scores == [0, 2]

    def test_zero_workers(self) -> None:
        with pytest.raises(ValueError, match="workers"):
            process.score_each("a", ["a"], scorer=Levenshtein.distance, workers=0)

    def test_non_callable_scorer(self) -> None:
        with pytest.raises(TypeError, match="callable"):
            process.score_each("a", ["a"], scorer="levenshtein")  # type: ignore[arg-type]


class TestExtract:
    CHOICES = ["apple", "apply", "ample", "maple", "orange"]

    def test_default_scorer_is_jaro_winkler(self) -> None:
        best = process.extractOne("appel", self.CHOICES)
        assert best is not None
        choice, score, idx = best
        assert choice == "apple"
        assert idx == 0
        assert score == pytest.approx(JaroWinkler.similarity("appel", "apple"))

    def test_similarity_sorted_descending(self) -> None:
        results = process.extract("apple", self.CHOICES, scorer=Jaro.similarity, limit=None)
        scores = [score for _, score, _ in results]
        assert scores == sorted(scores, reverse=True)
        assert results[0] == ("apple", 1.0, 0)

    def test_distance_sorted_ascending(self) -> None:
        results = process.extract("apple", self.CHOICES, scorer=Levenshtein.distance, limit=3)
        assert [r[0] for r in results] == ["apple", "apply", "ample"]
        assert [r[1] for r in results] == [0, 1, 1]

    def test_flat_alias_is_distance(self) -> None:
        results = process.extract("apple", self.CHOICES, scorer=editsim.levenshtein, limit=1)
        assert results == [("apple", 0, 0)]

    def test_score_cutoff_similarity(self) -> None:
        results = process.extract(
            "apple", self.CHOICES, scorer=Levenshtein.normalized_similarity, score_cutoff=0.75
        )
        assert [r[0] for r in results] == ["apple", "apply", "ample"]

    def test_score_cutoff_distance(self) -> None:
        results = process.extract(
            "apple", self.CHOICES, scorer=Levenshtein.distance, score_cutoff=0
        )
        assert results == [("apple", 0, 0)]

    def test_extract_one_none(self) -> None:
        assert process.extractOne("apple", [], scorer=Levenshtein.distance) is None
        assert (
            process.extractOne(
                "apple", ["zzzzz"], scorer=Jaro.similarity, score_cutoff=0.5
            )
            is None
        )

    def test_negative_limit(self) -> None:
        with pytest.raises(ValueError, match="limit"):
            process.extract("apple", self.CHOICES, limit=-1)

    def test_hamming_error_propagates(self) -> None:
        with pytest.raises(editsim.LengthMismatchError):
            process.extract("apple", self.CHOICES, scorer=Hamming.distance)


class TestCdist:
    def test_shape_and_values(self) -> None:
        np = pytest.importorskip("numpy")
        queries = ["kitten", "sitting"]
        choices = ["kitten", "sitting", ""]
        matrix = process.cdist(queries, choices, scorer=Levenshtein.distance)
        assert matrix.shape == (2, 3)
        assert np.issubdtype(matrix.dtype, np.integer)
        assert matrix.tolist() == [[0, 3, 6], [3, 0, 7]]

    def test_dtype(self) -> None:
        np = pytest.importorskip("numpy")
        matrix = process.cdist(["a"], ["a", "b"], scorer=Jaro.similarity, dtype=np.float32)
        assert matrix.dtype == np.float32
        assert matrix.tolist() == [[1.0, 0.0]]

    def test_empty(self) -> None:
        pytest.importorskip("numpy")
        assert process.cdist([], ["a"]).shape == (0, 1)
        assert process.cdist(["a", "b"], []).shape == (2, 0)

    def test_workers(self) -> None:
        pytest.importorskip("numpy")
        queries = ["test", "tset"]
        matrix = process.cdist(queries, CANDIDATES, scorer=Levenshtein.distance, workers=2)
        assert matrix.tolist() == [
            editsim.levenshtein_against_collection(q, CANDIDATES) for q in queries
        ]
