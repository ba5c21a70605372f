"""Luhn checksum verification and check-digit computation."""

from __future__ import annotations

from za_identity.core.exceptions import ChecksumInputError
from za_identity.validator.sanitizer import is_ascii_digits


def _luhn_sum(digits: str, *, double_first: bool) -> int:
    total = 0
    double = double_first
    for char in reversed(digits):
        digit = int(char)
        if double:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
        double = not double
    return total


def is_valid_luhn_checksum(digits: str) -> bool:
    """True when ``digits`` (check digit included) passes the Luhn test.

    Works on any length. Empty or non-digit input fails closed.
    """
    if not is_ascii_digits(digits):
        return False
    return _luhn_sum(digits, double_first=False) % 10 == 0


def luhn_check_digit(base: str) -> int:
    """Check digit to append to ``base`` so the result passes the Luhn test.

    The rightmost digit of ``base`` sits in a doubled position once the check
    digit is appended, so doubling starts immediately.
    """
    if not is_ascii_digits(base):
        raise ChecksumInputError(f"Luhn base must be ASCII digits, got {len(base)} chars")
    return (10 - _luhn_sum(base, double_first=True) % 10) % 10
