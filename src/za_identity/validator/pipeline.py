"""Top-level validation state machine for South African identity numbers.

The format is ``YYMMDDSSSSCAZ``:

- ``YYMMDD`` date of birth, century ambiguous
- ``SSSS`` sequence number; 0000-4999 female, 5000-9999 male
- ``C`` citizenship: 0 citizen, 1 permanent resident, 2 refugee
- ``A`` race indicator; 0-7 legacy classification, 8 or 9 modern
- ``Z`` Luhn check digit

Gates run strictly in order and the first failure is terminal:
sanitize, length, citizenship digit, date of birth, checksum.
"""

from __future__ import annotations

import logging

from za_identity.models.identity import ValidationOutcome
from za_identity.validator.dates import is_valid_date_in_id
from za_identity.validator.luhn import is_valid_luhn_checksum
from za_identity.validator.sanitizer import sanitize_number
from za_identity.validator.structure import has_valid_length, is_valid_citizenship_digit

logger = logging.getLogger(__name__)


def luhn_id_validate(number: str) -> ValidationOutcome:
    """Validate ``number`` and return a tri-state outcome.

    The citizenship digit is checked before the date, so an ID with both a bad
    citizenship digit and a bad date reports ``CITIZENSHIP_VIOLATION``.
    """
    digits = sanitize_number(number)

    if not has_valid_length(digits):
        logger.debug("Rejected at length gate: %d digits", len(digits))
        return ValidationOutcome.INVALID

    if not is_valid_citizenship_digit(digits):
        logger.debug("Rejected at citizenship gate")
        return ValidationOutcome.CITIZENSHIP_VIOLATION

    if not is_valid_date_in_id(digits):
        logger.debug("Rejected at date-of-birth gate")
        return ValidationOutcome.INVALID

    if not is_valid_luhn_checksum(digits):
        logger.debug("Rejected at checksum gate")
        return ValidationOutcome.INVALID

    return ValidationOutcome.VALID
