"""Tests for echoprint.analysis.entropy — entropy estimates and helpers."""

from __future__ import annotations

import math

import pytest

from echoprint.analysis import entropy


class TestEstimateEntropy:
    """Tests for estimate_entropy()."""

    def test_exact_key(self) -> None:
        assert entropy.estimate_entropy("canvas_text") == 15.3

    def test_case_insensitive(self) -> None:
        assert entropy.estimate_entropy("WebGL_Renderer") == 12.5

    def test_non_letters_are_normalized(self) -> None:
        assert entropy.estimate_entropy("screen-resolution") == 6.5

    def test_partial_match_name_contains_key(self) -> None:
        assert entropy.estimate_entropy("timezone_offset") == 5.8

    def test_partial_match_key_contains_name(self) -> None:
        assert entropy.estimate_entropy("language") == 4.2

    def test_unknown_falls_back_to_default(self) -> None:
        assert entropy.estimate_entropy("quantum_flux") == entropy.DEFAULT_ENTROPY_BITS

    @pytest.mark.parametrize("name", ["", "123", "---"])
    def test_empty_name_falls_back_to_default(self, name: str) -> None:
        assert entropy.estimate_entropy(name) == entropy.DEFAULT_ENTROPY_BITS

    def test_never_negative(self) -> None:
        for name in ("webdriver", "indexed_db", "anything", "fpjs_visitor_id"):
            assert entropy.estimate_entropy(name) >= 0


class TestEntropyToScore:
    """Tests for entropy_to_score()."""

    @pytest.mark.parametrize(
        ("bits", "expected"),
        [
            (0, 0.0),
            (16.5, 50.0),
            (33, 100.0),
            (66, 100.0),
        ],
    )
    def test_scaling(self, bits: float, expected: float) -> None:
        assert entropy.entropy_to_score(bits) == pytest.approx(expected)

    def test_negative_bits_clamp_to_zero(self) -> None:
        assert entropy.entropy_to_score(-5) == 0.0


class TestShannonEntropy:
    def test_empty(self) -> None:
        assert entropy.calculate_shannon_entropy([]) == 0.0

    def test_single_value(self) -> None:
        assert entropy.calculate_shannon_entropy(["a", "a", "a"]) == 0.0

    def test_uniform_four_values(self) -> None:
        assert entropy.calculate_shannon_entropy(["a", "b", "c", "d"]) == pytest.approx(2.0)


class TestBitsOfEntropy:
    def test_surprisal(self) -> None:
        assert entropy.bits_of_entropy("x", {"x": 1, "y": 3}, 4) == pytest.approx(2.0)

    def test_unseen_value(self) -> None:
        assert entropy.bits_of_entropy("z", {"x": 1}, 1) == 0.0

    def test_no_samples(self) -> None:
        assert entropy.bits_of_entropy("x", {"x": 1}, 0) == 0.0


class TestSummarizeEntropy:
    def test_summary(self) -> None:
        summary = entropy.summarize_entropy({"a": 1.0, "b": 3.0, "c": 2.0})
        assert summary["total_entropy"] == 6.0
        assert summary["average_entropy"] == 2.0
        assert summary["max_entropy"] == 3.0
        assert summary["contributing_signals"] == [("b", 3.0), ("c", 2.0), ("a", 1.0)]

    def test_empty(self) -> None:
        summary = entropy.summarize_entropy({})
        assert summary["total_entropy"] == 0
        assert summary["average_entropy"] == 0.0
        assert summary["contributing_signals"] == []

    def test_top_ten_only(self) -> None:
        summary = entropy.summarize_entropy({f"s{i}": float(i) for i in range(15)})
        assert len(summary["contributing_signals"]) == 10


class TestCombinedEntropy:
    def test_empty(self) -> None:
        assert entropy.combined_entropy([]) == 0.0

    def test_first_counts_in_full(self) -> None:
        assert entropy.combined_entropy([10.0]) == 10.0

    def test_default_correlation(self) -> None:
        assert entropy.combined_entropy([10.0, 10.0]) == pytest.approx(18.5)

    def test_explicit_correlations(self) -> None:
        assert entropy.combined_entropy([10.0, 10.0], [0.0, 1.0]) == pytest.approx(15.0)


class TestEstimatePopulationSize:
    def test_powers_of_two(self) -> None:
        assert entropy.estimate_population_size(10) == 1024
        assert math.isclose(entropy.estimate_population_size(33), 2**33)
