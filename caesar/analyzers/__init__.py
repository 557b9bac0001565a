"""
Caesar Analyzers
=================

Diagnostics over plaintext and ciphertext: character statistics and
English letter-frequency ranking of brute-force candidates.
"""

from caesar.analyzers.text_stats import analyze_text, count_words
from caesar.analyzers.frequency import (
    ENGLISH_FREQUENCIES,
    best_candidate,
    letter_counts,
    letter_frequencies,
    rank_candidates,
    score_english,
)

__all__ = [
    "ENGLISH_FREQUENCIES",
    "analyze_text",
    "best_candidate",
    "count_words",
    "letter_counts",
    "letter_frequencies",
    "rank_candidates",
    "score_english",
]
