"""
Caesar Validation
==================

Strict report functions for messages, passphrases and manual shifts.
"""

from caesar.validation.validators import (
    DEFAULT_MAX_LENGTH,
    validate_message,
    validate_passphrase,
    validate_session,
    validate_shift,
)

__all__ = [
    "DEFAULT_MAX_LENGTH",
    "validate_message",
    "validate_passphrase",
    "validate_session",
    "validate_shift",
]
