"""Field extractors.

Every extractor sanitizes and length-checks its own input; none assumes the
caller validated first. Malformed input yields ``None`` (``False`` for
:func:`is_legacy_id`).
"""

from __future__ import annotations

from typing import Optional

from za_identity.models.identity import (
    Citizenship,
    DateComponents,
    ExtractedInfo,
    Gender,
    ValidationOutcome,
)
from za_identity.validator.dates import is_valid_id_date
from za_identity.validator.pipeline import luhn_id_validate
from za_identity.validator.sanitizer import sanitize_number
from za_identity.validator.structure import (
    CITIZENSHIP_INDEX,
    RACE_INDICATOR_INDEX,
    has_valid_length,
)

MALE_SEQUENCE_THRESHOLD = 5000
LEGACY_RACE_INDICATORS = frozenset("01234567")

CITIZENSHIP_BY_DIGIT: dict[str, Citizenship] = {
    "0": Citizenship.SOUTH_AFRICAN_CITIZEN,
    "1": Citizenship.PERMANENT_RESIDENT,
    "2": Citizenship.REFUGEE,
}


def _identity_digits(number: str) -> Optional[str]:
    digits = sanitize_number(number)
    return digits if has_valid_length(digits) else None


def extract_gender(number: str) -> Optional[Gender]:
    """Sequence number (indices 6-9) as an integer: below 5000 is female."""
    digits = _identity_digits(number)
    if digits is None:
        return None
    sequence = int(digits[6:10])
    return Gender.FEMALE if sequence < MALE_SEQUENCE_THRESHOLD else Gender.MALE


def extract_citizenship(number: str) -> Optional[Citizenship]:
    digits = _identity_digits(number)
    if digits is None:
        return None
    return CITIZENSHIP_BY_DIGIT.get(digits[CITIZENSHIP_INDEX])


def extract_race_indicator(number: str) -> Optional[str]:
    digits = _identity_digits(number)
    if digits is None:
        return None
    return digits[RACE_INDICATOR_INDEX]


def is_legacy_id(number: str) -> bool:
    """True when the race indicator is 0-7 (pre-1994 format)."""
    indicator = extract_race_indicator(number)
    return indicator is not None and indicator in LEGACY_RACE_INDICATORS


def extract_date_components(number: str) -> Optional[DateComponents]:
    """Raw ``YY``/``MM``/``DD`` strings, only when the date is valid in some century."""
    digits = _identity_digits(number)
    if digits is None or not is_valid_id_date(digits[:6]):
        return None
    return DateComponents(year=digits[0:2], month=digits[2:4], day=digits[4:6])


def extract_info(number: str) -> ExtractedInfo:
    """Decode every field of ``number``.

    Only a ``VALID`` outcome populates the fields; ``INVALID`` and
    ``CITIZENSHIP_VIOLATION`` both produce an empty, ``valid=False`` record.
    """
    if luhn_id_validate(number) is not ValidationOutcome.VALID:
        return ExtractedInfo()

    return ExtractedInfo(
        valid=True,
        date_components=extract_date_components(number),
        gender=extract_gender(number),
        citizenship=extract_citizenship(number),
        is_legacy=is_legacy_id(number),
        race_indicator=extract_race_indicator(number),
    )
