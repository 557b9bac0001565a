"""
Text Statistics
================

Character-class counts for a message: how much of it the cipher will
actually touch (Latin letters) and how much passes through unchanged
(spaces, digits, punctuation).
"""

from __future__ import annotations

import re
from typing import Any

from caesar.core.models import TextStatistics

_LETTER = re.compile(r"[A-Za-z]")
_DIGIT = re.compile(r"[0-9]")
# str patterns are Unicode-aware: "é" is a word character, "¿" is not.
# An ASCII-only \w would count "é" as punctuation; here it lands in no
# bucket, so analyze_text("café!") has one punctuation mark, not two.
_PUNCTUATION = re.compile(r"[^\w\s]")


def count_words(text: str) -> int:
    """Number of whitespace-delimited words; blank text has none."""
    return len(text.split())


def analyze_text(text: Any) -> TextStatistics:
    """Classify every character of *text* and count words.

    Classes are checked in the order letter, space, digit, punctuation,
    so each character lands in at most one bucket. Characters in none
    of them (tabs, newlines, underscores, non-Latin letters) only count
    toward ``total_chars``.

    >>> analyze_text("Hello, World! 123").punctuation
    2
    """
    if not isinstance(text, str) or not text:
        return TextStatistics()

    letters = spaces = numbers = punctuation = 0
    for char in text:
        if _LETTER.match(char):
            letters += 1
        elif char == " ":
            spaces += 1
        elif _DIGIT.match(char):
            numbers += 1
        elif _PUNCTUATION.match(char):
            punctuation += 1

    return TextStatistics(
        total_chars=len(text),
        letters=letters,
        spaces=spaces,
        punctuation=punctuation,
        numbers=numbers,
        words=count_words(text),
    )
