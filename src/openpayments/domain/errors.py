"""
Error types raised by the ISO 20022 catalog.

Validation is fail-fast: the first facet that does not hold aborts the walk
and surfaces as a single ValidationError. The numeric codes are part of the
public contract and stay stable across releases.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numeric codes carried by ValidationError."""
    TOO_SHORT = 1001
    TOO_LONG = 1002
    BELOW_MINIMUM = 1003
    PATTERN_MISMATCH = 1005


class OpenPaymentsError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(OpenPaymentsError):
    """
    A schema facet (length, pattern or minimum) does not hold.

    Not to be confused with pydantic's ValidationError, which reports
    structural problems at construction time.

    Attributes:
        code: One of the ErrorCode values
        message: Human readable description naming the failing type
        path: Alias path from the validated object to the failing value,
            e.g. "Ntfctn[0].Acct.Id.IBAN". Empty for a bare simple value.
    """

    def __init__(self, code: int, message: str, path: str = "") -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.path = path

    def prepend(self, segment: str) -> None:
        """Prefix the path with the field the error was found under."""
        if not self.path:
            self.path = segment
        elif self.path.startswith("["):
            self.path = f"{segment}{self.path}"
        else:
            self.path = f"{segment}.{self.path}"

    def __str__(self) -> str:
        if self.path:
            return f"[{self.code}] {self.path}: {self.message}"
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return f"ValidationError(code={self.code}, message={self.message!r}, path={self.path!r})"


class DecodeError(OpenPaymentsError):
    """Input could not be turned into a model (bad XML, wrong shape, bad root)."""


class UnknownMessageError(OpenPaymentsError):
    """No message is registered for the given identifier or namespace."""
