"""
Caesar Cipher Primitives
=========================

Pure functions implementing the cipher itself: passphrase-to-shift
derivation, the encode/decode transform, alphabet mapping and brute-force
enumeration of every possible key.

None of these functions raise on malformed input. Wrong types and absent
values degrade to a safe default (``0``, ``""``, ``{}`` or ``[]``), and
out-of-range shifts are normalised rather than rejected. Strict checking
is the job of :mod:`caesar.validation.validators`.

Nothing here caches results: every call is a function of its arguments
only.

References:
    - Suetonius, De Vita Caesarum, Divus Iulius 56.
    - Singh, S. (1999). The Code Book. Fourth Estate. Chapter 1.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

from caesar.core.models import AlphabetMapping, BruteForceCandidate

ALPHABET_SIZE = 26
PREVIEW_LENGTH = 50
TRUNCATION_MARKER = "..."

_UPPER_A = ord("A")
_LOWER_A = ord("a")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but never a meaningful shift
    return isinstance(value, Real) and not isinstance(value, bool)


def derive_shift(passphrase: Any) -> int:
    """Derive a shift in [0, 25] from a passphrase.

    Each character's code point is weighted by its 1-based position so
    that rearranging the same characters changes the result. The
    passphrase is trimmed first; an empty, whitespace-only or non-string
    passphrase yields 0.

    >>> derive_shift("")
    0
    >>> derive_shift("a")
    19
    """
    if not isinstance(passphrase, str):
        return 0
    trimmed = passphrase.strip()
    if not trimmed:
        return 0

    total = sum(ord(ch) * (i + 1) for i, ch in enumerate(trimmed))
    return total % ALPHABET_SIZE


def normalize_shift(shift: Any) -> int:
    """Reduce any shift value to the range [0, 25].

    Non-numeric, non-finite and negative values become 0. Anything else
    is floored and reduced modulo 26, so ``27`` and ``1`` are the same
    shift and ``3.9`` is shift 3.
    """
    if not _is_number(shift):
        return 0
    if not isinstance(shift, int):
        shift = float(shift)
        if not math.isfinite(shift):
            return 0
    if shift < 0:
        return 0
    return math.floor(shift) % ALPHABET_SIZE


def is_valid_shift(shift: Any) -> bool:
    """Return True for a whole number in [0, 25] (``bool`` excluded)."""
    if not _is_number(shift):
        return False
    if isinstance(shift, int):
        return 0 <= shift <= 25
    value = float(shift)
    return value.is_integer() and 0 <= value <= 25


def shift_char(char: str, shift: int) -> str:
    """Shift a single Latin letter, preserving case; pass anything else through."""
    if "A" <= char <= "Z":
        return chr((ord(char) - _UPPER_A + shift) % ALPHABET_SIZE + _UPPER_A)
    if "a" <= char <= "z":
        return chr((ord(char) - _LOWER_A + shift) % ALPHABET_SIZE + _LOWER_A)
    return char


def encode(text: Any, shift: Any) -> str:
    """Encrypt *text* with a Caesar shift.

    Args:
        text: Plaintext. Anything that is not a string yields ``""``.
        shift: Shift amount; normalised with :func:`normalize_shift`.

    Returns:
        The ciphertext. Letters keep their case; every other character
        is copied unchanged.
    """
    if not isinstance(text, str) or not text:
        return ""
    amount = normalize_shift(shift)
    return "".join(shift_char(ch, amount) for ch in text)


def decode(text: Any, shift: Any) -> str:
    """Decrypt *text* that was encrypted with :func:`encode` and *shift*."""
    if not isinstance(text, str) or not text:
        return ""
    reverse = (ALPHABET_SIZE - normalize_shift(shift)) % ALPHABET_SIZE
    return "".join(shift_char(ch, reverse) for ch in text)


def build_mapping(shift: Any) -> AlphabetMapping:
    """Return the full plaintext-to-ciphertext letter table for *shift*.

    Keys run A-Z then a-z. A shift that is not a whole number in
    [0, 25] yields an empty mapping.
    """
    if not is_valid_shift(shift):
        return {}
    amount = int(shift)

    mapping: AlphabetMapping = {}
    for base in (_UPPER_A, _LOWER_A):
        for offset in range(ALPHABET_SIZE):
            letter = chr(base + offset)
            mapping[letter] = shift_char(letter, amount)
    return mapping


def make_preview(text: str, length: int = PREVIEW_LENGTH) -> str:
    """Truncate *text* to *length* characters, marking the cut."""
    if len(text) > length:
        return text[:length] + TRUNCATION_MARKER
    return text


def brute_force(
    cipher_text: Any, *, preview_length: int = PREVIEW_LENGTH
) -> list[BruteForceCandidate]:
    """Decrypt *cipher_text* with every one of the 26 shifts.

    The keyspace is small enough to enumerate completely, which is the
    point of the exercise: exactly one candidate is the plaintext.

    Returns:
        26 candidates ordered by ascending shift, or an empty list when
        *cipher_text* is empty or not a string.
    """
    if not isinstance(cipher_text, str) or not cipher_text:
        return []

    candidates = []
    for shift in range(ALPHABET_SIZE):
        text = decode(cipher_text, shift)
        candidates.append(
            BruteForceCandidate(
                shift=shift,
                text=text,
                preview=make_preview(text, preview_length),
            )
        )
    return candidates


def resolve_shift(passphrase: Any, manual_shift: Any = None) -> int:
    """Pick the shift an encryption session should use.

    A numeric manual shift overrides the passphrase: it is floored and
    clamped into [0, 25]. Otherwise the shift is derived from the
    passphrase.
    """
    if _is_number(manual_shift):
        value = float(manual_shift)
        if math.isfinite(value):
            return max(0, min(ALPHABET_SIZE - 1, math.floor(value)))
    return derive_shift(passphrase)
