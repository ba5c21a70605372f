"""Date-of-birth validation across the three candidate centuries."""

from __future__ import annotations

from datetime import date

from za_identity.core.types import YYMMDD
from za_identity.validator.sanitizer import is_ascii_digits

# Order is significant: 1800s, 1900s, then 2000s.
CENTURY_PREFIXES: tuple[str, ...] = ("18", "19", "20")


def is_valid_calendar_date(year: int, month: int, day: int) -> bool:
    """Gregorian validity check delegated to ``datetime.date``."""
    try:
        date(year, month, day)
    except ValueError:
        return False
    return True


def _is_valid_for_century(prefix: str, yymmdd: YYMMDD) -> bool:
    yyyymmdd = prefix + yymmdd
    return is_valid_calendar_date(
        int(yyyymmdd[:4]), int(yyyymmdd[4:6]), int(yyyymmdd[6:8])
    )


def is_valid_id_date(yymmdd: YYMMDD) -> bool:
    """Check a YYMMDD string against the 1800s, 1900s and 2000s.

    The two-digit year is ambiguous, so the date is accepted if any century
    yields a real calendar date. No age bound is applied.

    For instance ``000229`` is valid (29 Feb 2000) while ``010229`` is not:
    none of 1801, 1901 or 2001 is a leap year.
    """
    if len(yymmdd) != 6 or not is_ascii_digits(yymmdd):
        return False
    return any(_is_valid_for_century(prefix, yymmdd) for prefix in CENTURY_PREFIXES)


def is_valid_date_in_id(number: str) -> bool:
    """Apply :func:`is_valid_id_date` to the leading six digits of ``number``."""
    return is_valid_id_date(number[:6])
