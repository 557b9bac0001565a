"""
Frequency Analyzer
===================

Ranks brute-force candidates by how closely their letter distribution
matches English. A Caesar shift only relabels letters, so the letter
histogram of the ciphertext is the plaintext histogram rotated by the
key; the candidate whose histogram lines up with English is almost
always the plaintext.

Scoring uses Pearson's chi-squared statistic against the expected
English counts for the same number of letters.

References:
    - Lewand, R. E. (2000). Cryptological Mathematics. MAA. Table 1.1.
    - Pearson, K. (1900). On the criterion that a given system of
      deviations. Philosophical Magazine, 50(302), 157-175.
    - Sinkov, A. (1966). Elementary Cryptanalysis: A Mathematical
      Approach. Mathematical Association of America.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence

import numpy as np

from shared.math_utils import chi_squared_test, letter_histogram
from caesar.core.cipher import PREVIEW_LENGTH, brute_force
from caesar.core.models import BruteForceCandidate, RankedCandidate

# Relative frequency of A..Z in English text (Lewand, 2000)
ENGLISH_FREQUENCIES = np.array(
    [
        0.08167, 0.01492, 0.02782, 0.04253, 0.12702, 0.02228, 0.02015,
        0.06094, 0.06966, 0.00153, 0.00772, 0.04025, 0.02406, 0.06749,
        0.07507, 0.01929, 0.00095, 0.05987, 0.06327, 0.09056, 0.02758,
        0.00978, 0.02360, 0.00150, 0.01974, 0.00074,
    ],
    dtype=np.float64,
)


def letter_counts(text: Any) -> np.ndarray:
    """Case-folded counts of A-Z in *text* as a length-26 array."""
    return letter_histogram(text if isinstance(text, str) else "")


def letter_frequencies(text: Any) -> dict[str, float]:
    """Relative frequency of each letter A-Z in *text*, case-folded.

    Returns all zeros when *text* contains no Latin letters.
    """
    counts = letter_counts(text)
    total = counts.sum()
    if total:
        counts = counts / total
    return {chr(ord("A") + i): float(counts[i]) for i in range(26)}


def score_english(text: Any) -> tuple[float, float]:
    """Chi-squared distance of *text* from English letter frequencies.

    Returns:
        ``(chi2, p_value)``. Text without Latin letters cannot be scored
        and returns ``(inf, 0.0)``.
    """
    observed = letter_counts(text)
    total = observed.sum()
    if total == 0:
        return math.inf, 0.0
    return chi_squared_test(observed, ENGLISH_FREQUENCIES * total)


def rank_candidates(
    candidates: Sequence[BruteForceCandidate],
) -> list[RankedCandidate]:
    """Score each candidate and sort from most to least English-like.

    The sort is stable, so candidates with equal scores keep their
    ascending-shift order.
    """
    ranked = []
    for candidate in candidates:
        chi2, p_value = score_english(candidate.text)
        ranked.append(
            RankedCandidate(
                shift=candidate.shift,
                text=candidate.text,
                preview=candidate.preview,
                chi_squared=chi2,
                p_value=p_value,
            )
        )
    ranked.sort(key=lambda c: c.chi_squared)
    return ranked


def best_candidate(
    cipher_text: Any, *, preview_length: int = PREVIEW_LENGTH
) -> Optional[RankedCandidate]:
    """Most likely decryption of *cipher_text*, or ``None`` for empty input."""
    ranked = rank_candidates(brute_force(cipher_text, preview_length=preview_length))
    return ranked[0] if ranked else None
