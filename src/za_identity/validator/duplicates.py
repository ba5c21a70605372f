"""Duplicate-collision detection between two identity numbers."""

from __future__ import annotations

from za_identity.validator.sanitizer import sanitize_number
from za_identity.validator.structure import CITIZENSHIP_INDEX, has_valid_length

# Date, sequence and citizenship; collisions here are resolved by the 8/9 race indicator.
COLLISION_PREFIX_LENGTH = CITIZENSHIP_INDEX + 1


def would_be_duplicates(id1: str, id2: str) -> bool:
    """True when both are 13 digits and share their first 11 digits."""
    first = sanitize_number(id1)
    second = sanitize_number(id2)
    if not (has_valid_length(first) and has_valid_length(second)):
        return False
    return first[:COLLISION_PREFIX_LENGTH] == second[:COLLISION_PREFIX_LENGTH]
