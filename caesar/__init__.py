"""
CaesarLab Caesar -- Substitution Cipher Teaching Engine
========================================================

Derives a shift from a passphrase, applies and reverses a Caesar shift,
and provides the diagnostics that show why the cipher offers no
confidentiality: text statistics, the full alphabet mapping, brute-force
enumeration of all 26 keys and frequency ranking of the candidates.

Modules:
    - caesar.core.cipher: Pure cipher primitives
    - caesar.core.engine: Facade orchestrator returning ScanResults
    - caesar.core.models: Pydantic data models
    - caesar.analyzers: Text statistics and frequency ranking
    - caesar.validation: Input validation gate
    - caesar.output: Console and report output
    - caesar.cli: Click-based command-line interface

References:
    - Singh, S. (1999). The Code Book. Fourth Estate.
    - Sinkov, A. (1966). Elementary Cryptanalysis. MAA.
"""

__version__ = "1.0.0"
__tool_name__ = "caesar"

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
from caesar.analyzers.text_stats import analyze_text
from caesar.analyzers.frequency import best_candidate, rank_candidates
from caesar.validation.validators import (
    validate_message,
    validate_passphrase,
    validate_session,
    validate_shift,
)
from caesar.core.engine import CaesarEngine

__all__ = [
    "CaesarEngine",
    "analyze_text",
    "best_candidate",
    "brute_force",
    "build_mapping",
    "decode",
    "derive_shift",
    "encode",
    "is_valid_shift",
    "normalize_shift",
    "rank_candidates",
    "resolve_shift",
    "validate_message",
    "validate_passphrase",
    "validate_session",
    "validate_shift",
]
