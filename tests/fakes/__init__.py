"""Shared test helpers: identity-number builders with correct check digits."""

from __future__ import annotations

from za_identity.validator.luhn import luhn_check_digit


def build_id(base: str) -> str:
    """Append the Luhn check digit to a 12-digit base."""
    assert len(base) == 12 and base.isdigit(), base
    return base + str(luhn_check_digit(base))


def build_from_parts(
    dob: str = "800101",
    sequence: str = "5009",
    citizenship: str = "0",
    race_indicator: str = "8",
) -> str:
    return build_id(dob + sequence + citizenship + race_indicator)


def corrupt_checksum(number: str) -> str:
    """Same number with the last digit shifted by one, so Luhn fails."""
    return number[:-1] + str((int(number[-1]) + 1) % 10)


__all__ = ["build_from_parts", "build_id", "corrupt_checksum"]
