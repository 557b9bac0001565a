"""
Input Validation Gate
======================

Report functions that classify a message, passphrase or manual shift as
acceptable before it reaches the cipher. Each returns a structured
report with ``is_valid``, ordered ``errors`` and ordered ``warnings``;
warnings are advisory and never make a report invalid.

The transform functions accept anything and normalise it. These
validators are deliberately strict, so that unsanitised input can be
surfaced to the user instead of being silently corrected.

This module does not import the cipher layer.
"""

from __future__ import annotations

import math
import re
from numbers import Real
from typing import Any, Optional

from caesar.core.models import (
    MessageStats,
    MessageValidation,
    PassphraseStrength,
    PassphraseValidation,
    SessionValidation,
    ShiftValidation,
)

DEFAULT_MAX_LENGTH = 1000
LONG_MESSAGE_RATIO = 0.8
SHORT_PASSPHRASE_LENGTH = 3
GOOD_PASSPHRASE_LENGTH = 8
MIN_CHARACTER_CLASSES = 3
ROT13_SHIFT = 13

_NON_ASCII = re.compile(r"[^\x00-\x7F]")
_CHARACTER_CLASSES = (
    re.compile(r"[0-9]"),
    re.compile(r"[A-Z]"),
    re.compile(r"[a-z]"),
    re.compile(r"[^A-Za-z0-9]"),
)


# ===================================================================== #
#  Message
# ===================================================================== #


def validate_message(
    text: Any,
    max_length: int = DEFAULT_MAX_LENGTH,
    *,
    long_ratio: float = LONG_MESSAGE_RATIO,
) -> MessageValidation:
    """Check a message against the length policy.

    An empty or missing message is valid: there is simply nothing to
    encrypt. A *max_length* that is not a number falls back to
    :data:`DEFAULT_MAX_LENGTH`. Exceeding *max_length* is an error;
    passing *long_ratio* of the limit is a warning, as is any character
    outside 7-bit ASCII (those characters pass through the cipher
    unchanged).
    """
    if not isinstance(text, str) or not text:
        return MessageValidation()
    if not isinstance(max_length, Real) or isinstance(max_length, bool):
        max_length = DEFAULT_MAX_LENGTH

    stats = MessageStats(length=len(text), word_count=len(text.split()))
    errors: list[str] = []
    warnings: list[str] = []

    if len(text) > max_length:
        errors.append(
            f"Message exceeds maximum length of {max_length} characters "
            f"(current: {len(text)})"
        )

    if len(text) > max_length * long_ratio:
        warnings.append(
            f"Message is getting long ({len(text)}/{max_length} characters)"
        )

    if _NON_ASCII.search(text):
        warnings.append(
            "Message contains non-ASCII characters - only A-Z and a-z "
            "will be encrypted"
        )

    return MessageValidation(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        stats=stats,
    )


# ===================================================================== #
#  Passphrase
# ===================================================================== #


def validate_passphrase(passphrase: Any) -> PassphraseValidation:
    """Rate a passphrase by length and character variety.

    Passphrases are never invalid. An empty one is accepted with a
    warning that the cipher will use shift 0.
    """
    if not isinstance(passphrase, str) or not passphrase.strip():
        return PassphraseValidation(
            strength=PassphraseStrength.NONE,
            warnings=["No passphrase set - using shift of 0"],
        )

    trimmed = passphrase.strip()
    warnings: list[str] = []

    if len(trimmed) < SHORT_PASSPHRASE_LENGTH:
        warnings.append("Short passphrases create predictable shifts")
        strength = PassphraseStrength.WEAK
    elif len(trimmed) < GOOD_PASSPHRASE_LENGTH:
        strength = PassphraseStrength.MEDIUM
    else:
        strength = PassphraseStrength.GOOD

    variety = sum(1 for pattern in _CHARACTER_CLASSES if pattern.search(trimmed))
    if variety >= MIN_CHARACTER_CLASSES:
        strength = (
            PassphraseStrength.EXCELLENT
            if strength is PassphraseStrength.GOOD
            else PassphraseStrength.GOOD
        )

    return PassphraseValidation(warnings=warnings, strength=strength)


# ===================================================================== #
#  Shift
# ===================================================================== #


def validate_shift(shift: Any) -> ShiftValidation:
    """Check a manually entered shift.

    ``None`` is valid: the caller falls back to the passphrase-derived
    shift. Otherwise the value must be a number, a whole number, not
    negative and at most 25, checked in that order; the first failure
    is the only error reported.
    """
    if shift is None:
        return ShiftValidation()

    if not isinstance(shift, Real) or isinstance(shift, bool):
        return ShiftValidation(is_valid=False, errors=["Shift must be a number"])

    if not isinstance(shift, int) and not (
        math.isfinite(float(shift)) and float(shift).is_integer()
    ):
        return ShiftValidation(is_valid=False, errors=["Shift must be a whole number"])

    if shift < 0:
        return ShiftValidation(is_valid=False, errors=["Shift cannot be negative"])

    if shift > 25:
        return ShiftValidation(
            is_valid=False, errors=["Shift cannot be greater than 25"]
        )

    warnings: list[str] = []
    if shift == 0:
        warnings.append("Shift of 0 means no encryption is applied")
    if shift == ROT13_SHIFT:
        warnings.append("Shift of 13 is ROT13 - a well-known cipher")

    return ShiftValidation(warnings=warnings)


# ===================================================================== #
#  Session
# ===================================================================== #


def validate_session(
    message: Any,
    passphrase: Any = None,
    manual_shift: Optional[Any] = None,
    max_length: int = DEFAULT_MAX_LENGTH,
    *,
    long_ratio: float = LONG_MESSAGE_RATIO,
) -> SessionValidation:
    """Run all three validators over the inputs of one encryption."""
    message_report = validate_message(message, max_length, long_ratio=long_ratio)
    passphrase_report = validate_passphrase(passphrase)
    shift_report = validate_shift(manual_shift)

    return SessionValidation(
        is_valid=(
            message_report.is_valid
            and passphrase_report.is_valid
            and shift_report.is_valid
        ),
        message=message_report,
        passphrase=passphrase_report,
        shift=shift_report,
        can_encrypt=isinstance(message, str) and bool(message.strip()),
        has_key=isinstance(passphrase, str) and bool(passphrase.strip()),
    )
