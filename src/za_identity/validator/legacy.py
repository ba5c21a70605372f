"""Conversion of legacy (race indicator 0-7) IDs to the modern format."""

from __future__ import annotations

import logging
from typing import Optional

from za_identity.core.types import IdentityNumber
from za_identity.models.identity import ValidationOutcome
from za_identity.validator.luhn import luhn_check_digit
from za_identity.validator.pipeline import luhn_id_validate
from za_identity.validator.sanitizer import sanitize_number
from za_identity.validator.structure import RACE_INDICATOR_INDEX

logger = logging.getLogger(__name__)

MODERN_RACE_INDICATORS = frozenset({8, 9})
DEFAULT_MODERN_INDICATOR = 8


def convert_legacy_to_modern(
    number: str, target_indicator: int = DEFAULT_MODERN_INDICATOR
) -> Optional[IdentityNumber]:
    """Rewrite the race indicator to ``target_indicator`` and fix the check digit.

    Args:
        number: Identity number, formatted or not.
        target_indicator: Modern race indicator to write, 8 or 9.

    Returns:
        The sanitized modern ID. Already-modern IDs come back unchanged.
        ``None`` when the target is not 8 or 9, or ``number`` does not
        validate.
    """
    if target_indicator not in MODERN_RACE_INDICATORS:
        logger.debug("Refusing conversion to indicator %r", target_indicator)
        return None

    if luhn_id_validate(number) is not ValidationOutcome.VALID:
        return None

    digits = sanitize_number(number)
    if int(digits[RACE_INDICATOR_INDEX]) in MODERN_RACE_INDICATORS:
        return digits

    base = digits[:RACE_INDICATOR_INDEX] + str(target_indicator)
    return base + str(luhn_check_digit(base))
