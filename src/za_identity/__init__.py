"""Validation and decoding of South African national identity numbers."""

from __future__ import annotations

from za_identity.core.exceptions import (
    ChecksumInputError,
    InvalidCitizenshipDigitError,
    StructuralError,
    WrongLengthError,
    ZAIdentityError,
)
from za_identity.core.log import configure_logging
from za_identity.models.identity import (
    Citizenship,
    DateComponents,
    ExtractedInfo,
    Gender,
    ValidationOutcome,
)
from za_identity.validator.batch import batch_validate, summarize_batch
from za_identity.validator.dates import (
    is_valid_calendar_date,
    is_valid_date_in_id,
    is_valid_id_date,
)
from za_identity.validator.duplicates import would_be_duplicates
from za_identity.validator.extractors import (
    extract_citizenship,
    extract_date_components,
    extract_gender,
    extract_info,
    extract_race_indicator,
    is_legacy_id,
)
from za_identity.validator.legacy import convert_legacy_to_modern
from za_identity.validator.luhn import is_valid_luhn_checksum, luhn_check_digit
from za_identity.validator.pipeline import luhn_id_validate
from za_identity.validator.sanitizer import sanitize_number
from za_identity.validator.structure import (
    has_valid_length,
    is_valid_citizenship_digit,
    validate_structure,
)

__version__ = "0.1.0"

__all__ = [
    "ChecksumInputError",
    "Citizenship",
    "DateComponents",
    "ExtractedInfo",
    "Gender",
    "InvalidCitizenshipDigitError",
    "StructuralError",
    "ValidationOutcome",
    "WrongLengthError",
    "ZAIdentityError",
    "batch_validate",
    "configure_logging",
    "convert_legacy_to_modern",
    "extract_citizenship",
    "extract_date_components",
    "extract_gender",
    "extract_info",
    "extract_race_indicator",
    "has_valid_length",
    "is_legacy_id",
    "is_valid_calendar_date",
    "is_valid_citizenship_digit",
    "is_valid_date_in_id",
    "is_valid_id_date",
    "is_valid_luhn_checksum",
    "luhn_check_digit",
    "luhn_id_validate",
    "sanitize_number",
    "summarize_batch",
    "validate_structure",
    "would_be_duplicates",
]
