"""
Cipher primitives: shift derivation, encode/decode, mapping, brute force.
Run with:  python -m pytest tests/ -v
"""

import math
import string

import pytest

from caesar.core.cipher import (
    brute_force,
    build_mapping,
    decode,
    derive_shift,
    encode,
    is_valid_shift,
    make_preview,
    normalize_shift,
    resolve_shift,
)

SAMPLES = [
    "",
    "A",
    "Hello, World! 123",
    "The quick brown fox jumps over the lazy dog.",
    "ñandú Ærø 日本語 zZ",
    "tabs\tand\nnewlines",
]


# ── Shift derivation ──────────────────────────────────────────────────────────
@pytest.mark.parametrize("passphrase", ["", "   ", "\t\n", None, 42, ["a"]])
def test_derive_shift_empty_or_wrong_type_is_zero(passphrase):
    assert derive_shift(passphrase) == 0


def test_derive_shift_known_values():
    assert derive_shift("a") == 97 % 26
    assert derive_shift("ab") == (97 * 1 + 98 * 2) % 26 == 7
    assert derive_shift("password") == 18


def test_derive_shift_trims_before_weighting():
    assert derive_shift("  ab  ") == derive_shift("ab")


def test_derive_shift_position_weighting_distinguishes_anagrams():
    assert derive_shift("ab") != derive_shift("ba")


def test_derive_shift_is_deterministic_and_in_range():
    for key in ["a", "test", "verylongpassword", "123456", "special!@#$%", "日本"]:
        first = derive_shift(key)
        assert first == derive_shift(key)
        assert 0 <= first <= 25
        assert isinstance(first, int)


# ── Shift normalisation ───────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "shift, expected",
    [
        (0, 0),
        (3, 3),
        (25, 25),
        (26, 0),
        (29, 3),
        (3.9, 3),
        (-1, 0),
        (-27, 0),
        (float("nan"), 0),
        (float("inf"), 0),
        (True, 0),
        ("3", 0),
        (None, 0),
    ],
)
def test_normalize_shift(shift, expected):
    assert normalize_shift(shift) == expected


def test_is_valid_shift():
    assert is_valid_shift(0)
    assert is_valid_shift(25)
    assert is_valid_shift(3.0)
    assert not is_valid_shift(26)
    assert not is_valid_shift(-1)
    assert not is_valid_shift(3.5)
    assert not is_valid_shift(True)
    assert not is_valid_shift("3")


# ── Encode / decode ───────────────────────────────────────────────────────────
def test_encode_basic_and_wraparound():
    assert encode("ABC", 3) == "DEF"
    assert encode("abc", 3) == "def"
    assert encode("XYZ", 3) == "ABC"
    assert encode("xyz", 3) == "abc"


def test_encode_preserves_non_letters_and_case():
    assert encode("Hello, World! 123", 3) == "Khoor, Zruog! 123"
    assert encode("Test @#$ 456", 1) == "Uftu @#$ 456"
    assert encode("ñandú Ærø 日本語 zZ", 1) == "ñboeú Æsø 日本語 aA"


@pytest.mark.parametrize("text", [None, "", 123, b"ABC"])
def test_encode_and_decode_non_text_yield_empty_string(text):
    assert encode(text, 5) == ""
    assert decode(text, 5) == ""


def test_negative_shift_is_treated_as_zero():
    assert encode("ABC", -1) == encode("ABC", 0) == "ABC"
    assert decode("ABC", -5) == "ABC"


def test_fractional_and_large_shifts_are_normalised():
    assert encode("ABC", 3.7) == "DEF"
    assert encode("ABC", 29) == "DEF"
    assert encode("ABC", 10**12 + 3) == encode("ABC", (10**12 + 3) % 26)


def test_decode_basic():
    assert decode("DEF", 3) == "ABC"
    assert decode("Khoor, Zruog! 123", 3) == "Hello, World! 123"


@pytest.mark.parametrize("text", SAMPLES)
def test_round_trip_for_every_shift(text):
    shifts = list(range(-30, 60)) + [2.5, 25.999, float("nan"), None, "x"]
    for shift in shifts:
        assert decode(encode(text, shift), shift) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_repeated_round_trips(text):
    value = text
    for shift in (3, 17, 3, 25):
        value = encode(value, shift)
    for shift in (25, 3, 17, 3):
        value = decode(value, shift)
    assert value == text


@pytest.mark.parametrize("text", SAMPLES)
def test_identity_shift(text):
    assert encode(text, 0) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_period_26(text):
    for shift in range(0, 52):
        assert encode(text, shift) == encode(text, shift + 26)


def test_rot13_is_self_inverse():
    text = "Why did the chicken cross the road?"
    assert encode(encode(text, 13), 13) == text


# ── Alphabet mapping ──────────────────────────────────────────────────────────
@pytest.mark.parametrize("shift", range(26))
def test_mapping_has_52_same_case_letters(shift):
    mapping = build_mapping(shift)
    assert len(mapping) == 52
    for plain, cipher in mapping.items():
        assert len(plain) == len(cipher) == 1
        assert plain.isupper() == cipher.isupper()
        assert cipher in string.ascii_letters


def test_mapping_order_and_values():
    mapping = build_mapping(3)
    assert list(mapping) == list(string.ascii_uppercase + string.ascii_lowercase)
    assert mapping["A"] == "D"
    assert mapping["Z"] == "C"
    assert mapping["z"] == "c"


def test_mapping_agrees_with_encode():
    mapping = build_mapping(11)
    text = string.ascii_letters
    assert "".join(mapping[c] for c in text) == encode(text, 11)


def test_mapping_accepts_whole_float():
    assert build_mapping(3.0) == build_mapping(3)


@pytest.mark.parametrize("shift", [26, -1, 3.5, "3", None, True, float("nan")])
def test_mapping_invalid_shift_is_empty(shift):
    assert build_mapping(shift) == {}


# ── Brute force ───────────────────────────────────────────────────────────────
def test_brute_force_finds_hello():
    candidates = brute_force(encode("HELLO", 5))
    assert len(candidates) == 26
    assert [c.shift for c in candidates] == list(range(26))
    assert candidates[5].text == "HELLO"
    assert [c.shift for c in candidates if c.text == "HELLO"] == [5]


@pytest.mark.parametrize("text", ["", None, 17])
def test_brute_force_empty_input_returns_empty_list(text):
    assert brute_force(text) == []


def test_brute_force_candidate_texts_are_decodes():
    cipher = "Wkh Fdw"
    for candidate in brute_force(cipher):
        assert candidate.text == decode(cipher, candidate.shift)


def test_brute_force_preview_truncation():
    long_text = "a" * 60
    candidate = brute_force(long_text)[0]
    assert candidate.preview == "a" * 50 + "..."
    assert candidate.text == long_text

    exact = brute_force("b" * 50)[0]
    assert exact.preview == "b" * 50


def test_brute_force_custom_preview_length():
    candidate = brute_force("abcdefghij", preview_length=4)[1]
    assert candidate.preview == "zabc..."


def test_make_preview_short_text_unchanged():
    assert make_preview("short") == "short"


# ── Effective shift ───────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "manual, expected",
    [
        (None, 7),
        (3, 3),
        (30, 25),
        (-4, 0),
        (3.9, 3),
        ("12", 7),
        (True, 7),
        (math.nan, 7),
    ],
)
def test_resolve_shift_prefers_numeric_manual_shift(manual, expected):
    assert resolve_shift("ab", manual) == expected
