"""
Validation gate: message, passphrase, shift and session reports.
Run with:  python -m pytest tests/ -v
"""

import pytest
from pydantic import ValidationError

from caesar.core.models import PassphraseStrength
from caesar.validation.validators import (
    validate_message,
    validate_passphrase,
    validate_session,
    validate_shift,
)


# ── Shift ─────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "shift, errors, warnings",
    [
        (None, [], []),
        (5, [], []),
        (25, [], []),
        (3.0, [], []),
        (0, [], ["Shift of 0 means no encryption is applied"]),
        (13, [], ["Shift of 13 is ROT13 - a well-known cipher"]),
        (26, ["Shift cannot be greater than 25"], []),
        (-1, ["Shift cannot be negative"], []),
        (3.5, ["Shift must be a whole number"], []),
        (-1.5, ["Shift must be a whole number"], []),
        (float("nan"), ["Shift must be a whole number"], []),
        (float("inf"), ["Shift must be a whole number"], []),
        ("5", ["Shift must be a number"], []),
        (True, ["Shift must be a number"], []),
        ([3], ["Shift must be a number"], []),
    ],
)
def test_validate_shift(shift, errors, warnings):
    report = validate_shift(shift)
    assert report.errors == errors
    assert report.warnings == warnings
    assert report.is_valid is (not errors)


# ── Message ───────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("text", ["", None, 7])
def test_empty_message_is_valid_with_zero_stats(text):
    report = validate_message(text)
    assert report.is_valid
    assert report.errors == []
    assert report.warnings == []
    assert report.stats.length == 0
    assert report.stats.word_count == 0


def test_message_over_limit():
    report = validate_message("a" * 1001)
    assert not report.is_valid
    assert report.errors == [
        "Message exceeds maximum length of 1000 characters (current: 1001)"
    ]
    assert report.warnings == ["Message is getting long (1001/1000 characters)"]


def test_message_long_warning_threshold():
    assert validate_message("a" * 800).warnings == []
    report = validate_message("a" * 801)
    assert report.is_valid
    assert report.warnings == ["Message is getting long (801/1000 characters)"]


def test_message_custom_limit():
    report = validate_message("abcdef", max_length=5)
    assert report.errors == [
        "Message exceeds maximum length of 5 characters (current: 6)"
    ]


def test_message_non_ascii_warning():
    report = validate_message("héllo")
    assert report.is_valid
    assert report.warnings == [
        "Message contains non-ASCII characters - only A-Z and a-z will be encrypted"
    ]


def test_message_stats():
    report = validate_message("  attack at   dawn ")
    assert report.stats.length == 19
    assert report.stats.word_count == 3


# ── Passphrase ────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("passphrase", ["", "   ", None])
def test_missing_passphrase(passphrase):
    report = validate_passphrase(passphrase)
    assert report.is_valid
    assert report.strength is PassphraseStrength.NONE
    assert report.warnings == ["No passphrase set - using shift of 0"]


@pytest.mark.parametrize(
    "passphrase, strength",
    [
        ("ab", PassphraseStrength.WEAK),
        ("a!", PassphraseStrength.WEAK),
        ("abc", PassphraseStrength.MEDIUM),
        ("abcdefgh", PassphraseStrength.GOOD),
        ("Ab1", PassphraseStrength.GOOD),
        ("A1!", PassphraseStrength.GOOD),
        ("Abcdefg1", PassphraseStrength.EXCELLENT),
        ("  Ab1  ", PassphraseStrength.GOOD),
    ],
)
def test_passphrase_strength(passphrase, strength):
    report = validate_passphrase(passphrase)
    assert report.is_valid
    assert report.strength is strength


def test_short_passphrase_warning():
    assert validate_passphrase("ab").warnings == [
        "Short passphrases create predictable shifts"
    ]
    assert validate_passphrase("abc").warnings == []


# ── Session ───────────────────────────────────────────────────────────────────
def test_session_all_valid():
    session = validate_session("Hello", "secret", 3)
    assert session.is_valid
    assert session.can_encrypt
    assert session.has_key
    assert session.passphrase.strength is PassphraseStrength.MEDIUM


def test_session_invalid_shift_invalidates_session():
    session = validate_session("Hello", "secret", 30)
    assert not session.is_valid
    assert session.message.is_valid
    assert session.shift.errors == ["Shift cannot be greater than 25"]


def test_session_blank_inputs():
    session = validate_session("   ", "  ")
    assert session.is_valid
    assert not session.can_encrypt
    assert not session.has_key


def test_session_respects_max_length():
    session = validate_session("toolong", max_length=3)
    assert not session.is_valid
    assert len(session.message.errors) == 1


def test_reports_are_immutable():
    report = validate_shift(3)
    with pytest.raises(ValidationError):
        report.is_valid = False


def test_session_long_ratio():
    session = validate_session("abcdef", max_length=10, long_ratio=0.5)
    assert session.is_valid
    assert session.message.warnings == ["Message is getting long (6/10 characters)"]


@pytest.mark.parametrize("max_length", [None, "10", True, [5]])
def test_non_numeric_max_length_uses_default(max_length):
    report = validate_message("abc", max_length)
    assert report.is_valid
    assert report.errors == []
    assert report.stats.length == 3

    long_report = validate_message("a" * 1001, max_length)
    assert long_report.errors == [
        "Message exceeds maximum length of 1000 characters (current: 1001)"
    ]
