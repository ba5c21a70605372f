"""Input sanitization: reduce arbitrary text to its ASCII digits."""

from __future__ import annotations

import re

from za_identity.core.types import SanitizedDigits

# Only 0-9; full-width and other Unicode decimal digits are stripped too.
NON_DIGIT_PATTERN = re.compile(r"[^0-9]")


def is_ascii_digits(value: str) -> bool:
    """True for a non-empty string made only of ASCII ``0``-``9``."""
    return value.isascii() and value.isdigit()


def sanitize_number(number: str) -> SanitizedDigits:
    """Strip every character that is not an ASCII digit.

    Total over ``str``: the result may be empty but is never an error.
    """
    if is_ascii_digits(number):
        return number
    return NON_DIGIT_PATTERN.sub("", number)
