"""za_identity exception hierarchy."""

from __future__ import annotations


class ZAIdentityError(Exception):
    """Base exception for all za_identity errors."""


class StructuralError(ZAIdentityError):
    """Sanitized digits do not have the shape of an identity number."""

    def __init__(self, digits: str, message: str) -> None:
        self.digits = digits
        super().__init__(message)


class WrongLengthError(StructuralError):
    """Identity number is not exactly 13 digits long."""

    def __init__(self, digits: str) -> None:
        self.length = len(digits)
        super().__init__(digits, f"Expected 13 digits, got {self.length}")


class InvalidCitizenshipDigitError(StructuralError):
    """Citizenship digit (index 10) is not one of 0, 1 or 2."""

    def __init__(self, digits: str) -> None:
        self.digit = digits[10]
        super().__init__(digits, f"Invalid citizenship digit {self.digit!r}")


class ChecksumInputError(ZAIdentityError, ValueError):
    """Checksum computation was handed something other than ASCII digits."""
