"""Batch validation keyed by the caller's original strings."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from za_identity.models.identity import ValidationOutcome
from za_identity.validator.pipeline import luhn_id_validate

logger = logging.getLogger(__name__)


def batch_validate(numbers: Iterable[Any]) -> dict[str, ValidationOutcome]:
    """Validate each string in ``numbers``.

    Non-string elements are skipped. Keys are the original, unsanitized
    strings, so a repeated string is validated again and the last result wins.
    """
    results: dict[str, ValidationOutcome] = {}
    skipped = 0
    for number in numbers:
        if not isinstance(number, str):
            skipped += 1
            continue
        results[number] = luhn_id_validate(number)

    counts = summarize_batch(results)
    logger.info(
        "Batch validated: %d valid, %d invalid, %d citizenship violations, %d skipped",
        counts[ValidationOutcome.VALID],
        counts[ValidationOutcome.INVALID],
        counts[ValidationOutcome.CITIZENSHIP_VIOLATION],
        skipped,
    )
    return results


def summarize_batch(results: Mapping[str, ValidationOutcome]) -> dict[ValidationOutcome, int]:
    """Count outcomes in a :func:`batch_validate` result, zero-filled."""
    counts = Counter(results.values())
    return {outcome: counts.get(outcome, 0) for outcome in ValidationOutcome}
