"""
Caesar Core Data Models
========================

Pydantic models for the Caesar cipher engine. Every model here is an
immutable value type: results of text analysis, brute-force enumeration
and the three validation reports.

All models are serialisable to JSON and designed for consumption by both
the CLI output layer and report generators.
"""

from __future__ import annotations

import enum
import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

AlphabetMapping = dict[str, str]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class PassphraseStrength(str, enum.Enum):
    """Qualitative passphrase rating used for teaching purposes.

    The rating describes how varied the passphrase is, not how hard the
    resulting cipher is to break: every passphrase collapses to one of
    26 shifts.
    """

    NONE = "none"
    WEAK = "weak"
    MEDIUM = "medium"
    GOOD = "good"
    EXCELLENT = "excellent"


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class TextStatistics(_Frozen):
    """Character class counts for a message.

    Attributes:
        total_chars: Length of the text.
        letters: Latin letters A-Z / a-z.
        spaces: Space characters (U+0020 only).
        punctuation: Characters that are neither word characters nor whitespace.
        numbers: ASCII digits 0-9.
        words: Whitespace-delimited words.
    """

    total_chars: int = 0
    letters: int = 0
    spaces: int = 0
    punctuation: int = 0
    numbers: int = 0
    words: int = 0


class BruteForceCandidate(_Frozen):
    """One possible decryption of a ciphertext.

    Attributes:
        shift: Shift assumed for this candidate (0-25).
        text: The ciphertext decoded with ``shift``.
        preview: Bounded prefix of ``text`` for display.
    """

    shift: int = Field(ge=0, le=25)
    text: str
    preview: str


class RankedCandidate(BruteForceCandidate):
    """A brute-force candidate scored against English letter frequencies.

    Lower ``chi_squared`` means closer to English. Text without Latin
    letters scores ``inf``, which serialises as ``None`` so dumps stay
    valid JSON.
    """

    chi_squared: float
    p_value: float = Field(ge=0.0, le=1.0)

    @field_serializer("chi_squared")
    def _finite_or_none(self, value: float) -> Optional[float]:
        return value if math.isfinite(value) else None


# ===================================================================== #
#  Validation Models
# ===================================================================== #


class MessageStats(_Frozen):
    length: int = 0
    word_count: int = 0


class MessageValidation(_Frozen):
    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    stats: MessageStats = Field(default_factory=MessageStats)


class PassphraseValidation(_Frozen):
    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    strength: PassphraseStrength = PassphraseStrength.NONE


class ShiftValidation(_Frozen):
    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class SessionValidation(_Frozen):
    """Combined validation of everything needed for one encryption.

    Attributes:
        is_valid: True when all three component reports are valid.
        message: Message report.
        passphrase: Passphrase report.
        shift: Manual shift report.
        can_encrypt: The message contains something other than whitespace.
        has_key: The passphrase contains something other than whitespace.
    """

    is_valid: bool
    message: MessageValidation
    passphrase: PassphraseValidation
    shift: ShiftValidation
    can_encrypt: bool
    has_key: bool
