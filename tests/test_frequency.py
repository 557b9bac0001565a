"""
English frequency ranking of brute-force candidates.
Run with:  python -m pytest tests/ -v
"""

import math

import numpy as np
import pytest

from caesar.analyzers.frequency import (
    ENGLISH_FREQUENCIES,
    best_candidate,
    letter_counts,
    letter_frequencies,
    rank_candidates,
    score_english,
)
from caesar.core.cipher import brute_force, encode
from shared.math_utils import chi_squared_test, letter_histogram


# ── Histogram helpers ─────────────────────────────────────────────────────────
def test_english_frequencies_sum_to_one():
    assert ENGLISH_FREQUENCIES.shape == (26,)
    assert ENGLISH_FREQUENCIES.sum() == pytest.approx(1.0, abs=1e-3)


def test_letter_histogram_case_folds_and_ignores_others():
    hist = letter_histogram("aAb! ß 9z")
    assert hist[0] == 2
    assert hist[1] == 1
    assert hist[25] == 1
    assert hist.sum() == 4


def test_letter_frequencies():
    freqs = letter_frequencies("AAB")
    assert list(freqs) == [chr(c) for c in range(ord("A"), ord("Z") + 1)]
    assert freqs["A"] == pytest.approx(2 / 3)
    assert freqs["B"] == pytest.approx(1 / 3)
    assert freqs["C"] == 0.0


def test_letter_frequencies_without_letters_is_all_zero():
    assert set(letter_frequencies("123 !").values()) == {0.0}


# ── Chi-squared ───────────────────────────────────────────────────────────────
def test_chi_squared_perfect_fit():
    chi2, p = chi_squared_test([10, 20, 30], [10, 20, 30])
    assert chi2 == 0.0
    assert p == pytest.approx(1.0)


def test_chi_squared_rejects_bad_input():
    with pytest.raises(ValueError):
        chi_squared_test([1, 2], [1, 2, 3])
    with pytest.raises(ValueError):
        chi_squared_test([1, 2], [0, 2])


def test_score_english_without_letters():
    assert score_english("1234") == (math.inf, 0.0)
    assert score_english(None) == (math.inf, 0.0)


def test_english_scores_better_than_its_rotation(english_text):
    plain, _ = score_english(english_text)
    shifted, _ = score_english(encode(english_text, 11))
    assert plain < shifted


# ── Ranking ───────────────────────────────────────────────────────────────────
def test_rank_candidates_sorted_ascending(english_text):
    ranked = rank_candidates(brute_force(encode(english_text, 7)))
    assert len(ranked) == 26
    scores = [c.chi_squared for c in ranked]
    assert scores == sorted(scores)
    assert sorted(c.shift for c in ranked) == list(range(26))
    assert all(0.0 <= c.p_value <= 1.0 for c in ranked)


def test_rank_candidates_ties_keep_shift_order():
    ranked = rank_candidates(brute_force("123 !!"))
    assert [c.shift for c in ranked] == list(range(26))
    assert all(np.isinf(c.chi_squared) for c in ranked)


def test_best_candidate_recovers_the_key(english_text):
    for key in (1, 7, 13, 25):
        best = best_candidate(encode(english_text, key))
        assert best is not None
        assert best.shift == key
        assert best.text == english_text


def test_best_candidate_empty_input():
    assert best_candidate("") is None


def test_letter_counts():
    counts = letter_counts("Zz a")
    assert counts.shape == (26,)
    assert counts[25] == 2
    assert counts[0] == 1
    assert letter_counts(None).sum() == 0


def test_unscored_candidate_dumps_as_null():
    candidate = rank_candidates(brute_force("42"))[0]
    assert math.isinf(candidate.chi_squared)
    assert candidate.model_dump()["chi_squared"] is None
    assert '"chi_squared":null' in candidate.model_dump_json()


def test_scored_candidate_keeps_its_value(english_text):
    candidate = best_candidate(english_text)
    assert candidate.model_dump()["chi_squared"] == candidate.chi_squared
