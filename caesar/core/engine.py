"""
Caesar Engine
==============

Central orchestrator for CaesarLab. :class:`CaesarEngine` runs the
validation gate, calls the pure cipher functions and wraps their output
in a :class:`~shared.models.ScanResult` with findings that explain what
happened and why the cipher is weak.

The engine holds configuration and a logger, nothing else: results are
never cached and passphrases are never stored, logged or echoed into a
result.

Architecture follows the Facade pattern (Gamma et al., 1994).
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

from shared.config import CaesarLabConfig
from shared.logger import CaesarLabLogger
from shared.models import Finding, ScanResult, Severity

from caesar.analyzers.frequency import rank_candidates
from caesar.analyzers.text_stats import analyze_text
from caesar.core.cipher import (
    brute_force,
    build_mapping,
    decode,
    derive_shift,
    encode,
    resolve_shift,
)
from caesar.core.models import PassphraseStrength
from caesar.validation.validators import (
    validate_passphrase,
    validate_session,
    validate_shift,
)

_TOOL_NAME = "caesar"

_KEYSPACE_REFERENCE = (
    "Singh, S. (1999). The Code Book. Chapter 1: the keyspace of a shift "
    "cipher is 26."
)


class CaesarEngine:
    """Orchestrates all CaesarLab operations.

    Usage::

        engine = CaesarEngine()
        result = engine.encrypt("Attack at dawn", passphrase="legion")
        print(result.metadata["text"])
        result = engine.crack(result.metadata["text"], rank=True)

    Attributes:
        config: CaesarLab configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[CaesarLabConfig] = None) -> None:
        self.config = config or CaesarLabConfig()
        settings = self.config.global_settings
        self.logger = CaesarLabLogger(
            "caesar.engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

    # ------------------------------------------------------------------ #
    #  Encryption / Decryption
    # ------------------------------------------------------------------ #

    def encrypt(
        self,
        text: str,
        passphrase: Optional[str] = None,
        shift: Optional[Any] = None,
    ) -> ScanResult:
        """Encrypt *text* with a manual *shift* or a passphrase-derived one.

        The message is checked against the length policy first; a message
        that fails validation is not encrypted. An invalid manual shift is
        reported and the passphrase-derived shift is used instead.
        """
        return self._run(
            "encrypt", self._describe(text), self._transform,
            text, passphrase, shift, encode,
        )

    def decrypt(
        self,
        text: str,
        passphrase: Optional[str] = None,
        shift: Optional[Any] = None,
    ) -> ScanResult:
        """Reverse :meth:`encrypt` given the same passphrase or shift."""
        return self._run(
            "decrypt", self._describe(text), self._transform,
            text, passphrase, shift, decode,
        )

    def _transform(
        self,
        result: ScanResult,
        text: str,
        passphrase: Optional[str],
        shift: Optional[Any],
        transform: Callable[[Any, Any], str],
    ) -> None:
        max_length = self.config.caesar.max_message_length
        session = validate_session(
            text, passphrase, shift, max_length,
            long_ratio=self.config.caesar.long_message_ratio,
        )
        self._report(result, "Message", session.message.errors, session.message.warnings)
        self._report(result, "Shift", session.shift.errors, session.shift.warnings)

        effective = self._effective_shift(passphrase, shift, session.shift.is_valid)
        source = "manual" if shift is not None and session.shift.is_valid else "passphrase"
        if source == "passphrase":
            self._report(result, "Passphrase", [], session.passphrase.warnings)

        if not session.message.is_valid:
            result.add_finding(Finding(
                title="Message Rejected",
                description=(
                    f"The message was not {result.operation}ed because it "
                    f"failed validation."
                ),
                severity=Severity.HIGH,
                recommendation=f"Shorten the message to at most {max_length} characters.",
            ))
            result.summary = f"{result.operation.title()} refused: message failed validation"
            return

        output = transform(text, effective)
        self.logger.info(
            "%sed %d characters", result.operation.title(), len(output),
            shift=effective, shift_source=source,
        )

        result.metadata = {
            "shift": effective,
            "shift_source": source,
            "text": output,
            "can_encrypt": session.can_encrypt,
            "has_key": session.has_key,
            "passphrase_strength": session.passphrase.strength.value,
            "mapping": build_mapping(effective),
        }

        if result.operation == "encrypt" and session.can_encrypt:
            result.add_finding(Finding(
                title="No Confidentiality",
                description=(
                    f"The message was shifted by {effective}. Anyone can "
                    f"recover it by trying all 26 shifts."
                ),
                severity=Severity.INFO,
                references=[_KEYSPACE_REFERENCE],
            ))

        result.summary = (
            f"{result.operation.title()}ed {len(output)} characters "
            f"with shift {effective} ({source})"
        )

    def _effective_shift(
        self, passphrase: Optional[str], shift: Optional[Any], shift_valid: bool
    ) -> int:
        if shift is not None and shift_valid:
            return resolve_shift(passphrase, shift)
        if shift is not None:
            self.logger.warning("Ignoring invalid manual shift; using passphrase")
        return derive_shift(passphrase)

    # ------------------------------------------------------------------ #
    #  Key derivation / mapping
    # ------------------------------------------------------------------ #

    def derive(self, passphrase: str) -> ScanResult:
        """Derive the shift for *passphrase* and rate the passphrase."""
        return self._run("derive", "[passphrase]", self._derive, passphrase)

    def _derive(self, result: ScanResult, passphrase: str) -> None:
        report = validate_passphrase(passphrase)
        shift = derive_shift(passphrase)
        self._report(result, "Passphrase", report.errors, report.warnings)

        result.metadata = {
            "shift": shift,
            "strength": report.strength.value,
            "mapping": build_mapping(shift),
        }
        if report.strength in (PassphraseStrength.GOOD, PassphraseStrength.EXCELLENT):
            result.add_finding(Finding(
                title="Strength Does Not Transfer",
                description=(
                    f"The passphrase is rated {report.strength.value}, but it "
                    f"still reduces to one of 26 shifts (here {shift})."
                ),
                severity=Severity.INFO,
                references=[_KEYSPACE_REFERENCE],
            ))
        result.summary = f"Passphrase ({report.strength.value}) derives shift {shift}"

    def mapping(self, shift: Any) -> ScanResult:
        """Return the alphabet table for a shift in [0, 25]."""
        return self._run("mapping", f"shift={shift}", self._mapping, shift)

    def _mapping(self, result: ScanResult, shift: Any) -> None:
        report = validate_shift(shift)
        self._report(result, "Shift", report.errors, report.warnings)
        table = build_mapping(shift)
        result.metadata = {"shift": shift, "mapping": table}
        if table:
            result.summary = f"Alphabet mapping for shift {shift}"
        else:
            result.summary = f"No mapping: {shift!r} is not a shift in 0-25"

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    def analyze(self, text: str) -> ScanResult:
        """Compute character statistics for *text*."""
        return self._run("analyze", self._describe(text), self._analyze, text)

    def _analyze(self, result: ScanResult, text: str) -> None:
        stats = analyze_text(text)
        result.metadata = stats.model_dump()
        untouched = stats.total_chars - stats.letters
        if untouched:
            result.add_finding(Finding(
                title="Characters Left In Clear",
                description=(
                    f"{untouched} of {stats.total_chars} characters are not "
                    f"Latin letters and will pass through the cipher unchanged, "
                    f"leaking word boundaries and punctuation."
                ),
                severity=Severity.INFO,
                evidence={
                    "spaces": stats.spaces,
                    "punctuation": stats.punctuation,
                    "numbers": stats.numbers,
                },
            ))
        result.summary = (
            f"{stats.total_chars} characters, {stats.letters} letters, "
            f"{stats.words} words"
        )

    def crack(self, cipher_text: str, rank: Optional[bool] = None) -> ScanResult:
        """Try every shift on *cipher_text*.

        With *rank* (default from config) the candidates are also sorted
        by English letter frequency and the best guess is reported.
        """
        if rank is None:
            rank = self.config.caesar.rank_candidates
        return self._run(
            "crack", self._describe(cipher_text), self._crack, cipher_text, rank
        )

    def _crack(self, result: ScanResult, cipher_text: str, rank: bool) -> None:
        candidates = brute_force(
            cipher_text, preview_length=self.config.caesar.preview_length
        )
        if not candidates:
            result.add_finding(Finding(
                title="Nothing To Crack",
                description="The ciphertext is empty.",
                severity=Severity.LOW,
            ))
            result.metadata = {"candidates": [], "ranked": rank}
            result.summary = "No candidates: empty ciphertext"
            return

        result.add_finding(Finding(
            title="Keyspace Exhausted",
            description=(
                f"All {len(candidates)} possible shifts were tried. One of "
                f"them is the plaintext."
            ),
            severity=Severity.INFO,
            references=[_KEYSPACE_REFERENCE],
        ))

        if not rank:
            result.metadata = {
                "candidates": [c.model_dump() for c in candidates],
                "ranked": False,
            }
            result.summary = f"{len(candidates)} candidates generated"
            return

        ranked = rank_candidates(candidates)
        best = ranked[0]
        result.metadata = {
            "candidates": [c.model_dump() for c in ranked],
            "ranked": True,
        }
        if not math.isfinite(best.chi_squared):
            result.summary = (
                f"{len(ranked)} candidates generated; no letters to rank"
            )
            return

        result.metadata["best_shift"] = best.shift
        result.add_finding(Finding(
            title=f"Most Likely Shift: {best.shift}",
            description=(
                f"Shift {best.shift} gives the letter distribution closest "
                f"to English (chi-squared {best.chi_squared:.2f}): "
                f"{best.preview}"
            ),
            severity=Severity.INFO,
            evidence={"chi_squared": best.chi_squared, "p_value": best.p_value},
        ))
        result.summary = f"{len(ranked)} candidates ranked; best guess is shift {best.shift}"

    # ------------------------------------------------------------------ #
    #  Validation
    # ------------------------------------------------------------------ #

    def validate(
        self,
        message: Optional[str] = None,
        passphrase: Optional[str] = None,
        shift: Optional[Any] = None,
        max_length: Optional[int] = None,
    ) -> ScanResult:
        """Run the full validation gate without transforming anything."""
        return self._run(
            "validate", self._describe(message), self._validate,
            message, passphrase, shift, max_length,
        )

    def _validate(
        self,
        result: ScanResult,
        message: Optional[str],
        passphrase: Optional[str],
        shift: Optional[Any],
        max_length: Optional[int],
    ) -> None:
        limit = max_length if max_length is not None else self.config.caesar.max_message_length
        session = validate_session(
            message, passphrase, shift, limit,
            long_ratio=self.config.caesar.long_message_ratio,
        )
        self._report(result, "Message", session.message.errors, session.message.warnings)
        self._report(result, "Passphrase", session.passphrase.errors, session.passphrase.warnings)
        self._report(result, "Shift", session.shift.errors, session.shift.warnings)
        result.metadata = session.model_dump(mode="json")
        result.summary = "All inputs valid" if session.is_valid else "Validation failed"

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    def _run(
        self,
        operation: str,
        target: str,
        handler: Callable[..., None],
        *args: Any,
    ) -> ScanResult:
        """Create the result envelope, run *handler* and finalise timing.

        Unexpected exceptions become an error finding rather than
        propagating to the caller.
        """
        result = ScanResult(tool_name=_TOOL_NAME, operation=operation, target=target)
        with self.logger.operation(operation), self.logger.timed(operation):
            try:
                handler(result, *args)
            except Exception as exc:
                self.logger.exception("%s failed: %s", operation, exc)
                result.add_finding(Finding(
                    title="Analysis Error",
                    description=f"Unexpected error during {operation}: {exc}",
                    severity=Severity.HIGH,
                ))
                result.summary = f"Error during {operation}: {exc}"
        return result.finalize(result.summary or None)

    @staticmethod
    def _report(
        result: ScanResult, subject: str, errors: list[str], warnings: list[str]
    ) -> None:
        """Turn validation errors and warnings into findings."""
        for message in errors:
            result.add_finding(Finding(
                title=f"{subject} Invalid",
                description=message,
                severity=Severity.MEDIUM,
            ))
        for message in warnings:
            result.add_finding(Finding(
                title=f"{subject} Warning",
                description=message,
                severity=Severity.LOW,
            ))

    @staticmethod
    def _describe(text: Any) -> str:
        if not isinstance(text, str):
            return "[no message]"
        return f"[message: {len(text)} chars]"
