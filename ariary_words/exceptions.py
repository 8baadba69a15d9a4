"""
Custom exception hierarchy for amount spelling and receipt rendering.

Each exception type maps to a specific category of failure. The strict
helpers raise these; the template-facing entry points catch them and fall
back to the "montant invalide" sentinel instead.
"""

from __future__ import annotations


class AmountSpellingError(Exception):
    """Base exception for all amount-spelling failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidAmountError(AmountSpellingError):
    """The amount is negative, not finite, or not a number at all."""

    def __init__(self, message: str, details: dict | None = None, code: str = "INVALID_AMOUNT"):
        super().__init__(code, message, details)


class AmountOutOfRangeError(InvalidAmountError):
    """The amount is larger than the biggest value we know how to spell."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message, details, code="AMOUNT_OUT_OF_RANGE")


class InvalidRecipientError(AmountSpellingError):
    """The receipt e-mail address is malformed."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_RECIPIENT", message, details)


class EmailRelayNotConfiguredError(AmountSpellingError):
    """E-mail relay credentials are missing or still hold placeholder values."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("EMAIL_RELAY_NOT_CONFIGURED", message, details)
