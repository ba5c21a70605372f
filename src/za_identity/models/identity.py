"""Outcome, enum and value-object models for decoded identity numbers."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class ValidationOutcome(StrEnum):
    """Result of the top-level validation pipeline.

    ``CITIZENSHIP_VIOLATION`` means the citizenship digit was out of range, so
    the date and checksum were never evaluated. It is not the same as
    ``INVALID``.
    """

    VALID = "VALID"
    INVALID = "INVALID"
    CITIZENSHIP_VIOLATION = "CITIZENSHIP_VIOLATION"

    @property
    def is_valid(self) -> bool:
        return self is ValidationOutcome.VALID

    @classmethod
    def from_legacy(cls, value: Optional[bool]) -> ValidationOutcome:
        """Map the historical ``True``/``False``/``None`` encoding to an outcome."""
        if value is None:
            return cls.CITIZENSHIP_VIOLATION
        return cls.VALID if value else cls.INVALID

    def to_legacy(self) -> Optional[bool]:
        if self is ValidationOutcome.CITIZENSHIP_VIOLATION:
            return None
        return self is ValidationOutcome.VALID


class Gender(StrEnum):
    FEMALE = "female"
    MALE = "male"


class Citizenship(StrEnum):
    SOUTH_AFRICAN_CITIZEN = "south_african_citizen"
    PERMANENT_RESIDENT = "permanent_resident"
    REFUGEE = "refugee"


class DateComponents(BaseModel):
    """Raw two-digit date fields from the first six digits, leading zeros kept."""

    year: str
    month: str
    day: str

    model_config = {"frozen": True}


class ExtractedInfo(BaseModel):
    """Read-only view of everything decodable from one identity number."""

    valid: bool = False
    date_components: Optional[DateComponents] = None
    gender: Optional[Gender] = None
    citizenship: Optional[Citizenship] = None
    is_legacy: bool = False
    race_indicator: Optional[str] = None

    model_config = {"frozen": True}
