"""Structural checks: length and citizenship digit."""

from __future__ import annotations

from za_identity.core.exceptions import InvalidCitizenshipDigitError, WrongLengthError
from za_identity.core.types import IdentityNumber, SanitizedDigits

ID_LENGTH = 13
CITIZENSHIP_INDEX = 10
RACE_INDICATOR_INDEX = 11
CHECKSUM_INDEX = 12
VALID_CITIZENSHIP_DIGITS = frozenset({"0", "1", "2"})


def has_valid_length(digits: SanitizedDigits) -> bool:
    return len(digits) == ID_LENGTH


def is_valid_citizenship_digit(digits: SanitizedDigits) -> bool:
    """Index 10 must be 0 (citizen), 1 (permanent resident) or 2 (refugee)."""
    if len(digits) <= CITIZENSHIP_INDEX:
        return False
    return digits[CITIZENSHIP_INDEX] in VALID_CITIZENSHIP_DIGITS


def validate_structure(digits: SanitizedDigits) -> IdentityNumber:
    """Return ``digits`` as an identity number or raise a ``StructuralError``.

    Length is checked before the citizenship digit.

    Raises:
        WrongLengthError: ``digits`` is not exactly 13 characters.
        InvalidCitizenshipDigitError: index 10 is not 0, 1 or 2.
    """
    if not has_valid_length(digits):
        raise WrongLengthError(digits)
    if not is_valid_citizenship_digit(digits):
        raise InvalidCitizenshipDigitError(digits)
    return digits
