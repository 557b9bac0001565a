"""
Caesar Core Module
===================

Contains the cipher primitives, the data models and the facade engine.
"""

from caesar.core.cipher import (
    brute_force,
    build_mapping,
    decode,
    derive_shift,
    encode,
    is_valid_shift,
    normalize_shift,
    resolve_shift,
)
from caesar.core.engine import CaesarEngine
from caesar.core.models import (
    AlphabetMapping,
    BruteForceCandidate,
    MessageValidation,
    PassphraseStrength,
    PassphraseValidation,
    RankedCandidate,
    SessionValidation,
    ShiftValidation,
    TextStatistics,
)

__all__ = [
    "AlphabetMapping",
    "BruteForceCandidate",
    "CaesarEngine",
    "MessageValidation",
    "PassphraseStrength",
    "PassphraseValidation",
    "RankedCandidate",
    "SessionValidation",
    "ShiftValidation",
    "TextStatistics",
    "brute_force",
    "build_mapping",
    "decode",
    "derive_shift",
    "encode",
    "is_valid_shift",
    "normalize_shift",
    "resolve_shift",
]
