"""Tests for the luhn_id_validate state machine."""

from __future__ import annotations

import logging

import pytest

from tests.fakes import build_from_parts, build_id, corrupt_checksum
from za_identity.models.identity import ValidationOutcome
from za_identity.validator.pipeline import luhn_id_validate

VALID = ValidationOutcome.VALID
INVALID = ValidationOutcome.INVALID
VIOLATION = ValidationOutcome.CITIZENSHIP_VIOLATION


class TestScenarios:
    def test_valid_modern_male_citizen(self):
        assert luhn_id_validate("8001015009087") is VALID

    def test_wrong_check_digit(self):
        assert luhn_id_validate("8001015009088") is INVALID

    def test_citizenship_digit_out_of_range(self):
        assert luhn_id_validate("8001015009387") is VIOLATION

    def test_twelve_digits(self):
        assert luhn_id_validate("870110580008") is INVALID

    @pytest.mark.parametrize(
        "number",
        ["8001015009095", "8001015009004", "8001015009186", "8001015009285", "8701105800085", "0002295009084"],
    )
    def test_known_valid_ids(self, number):
        assert luhn_id_validate(number) is VALID

    def test_formatted_input_is_sanitized(self):
        assert luhn_id_validate("80-01-01 5009-087") is VALID
        assert luhn_id_validate(" 800101 5009 08 7 ") is VALID


class TestGateOrder:
    @pytest.mark.parametrize("digit", list("3456789"))
    def test_citizenship_violation_regardless_of_other_fields(self, digit):
        assert luhn_id_validate(build_from_parts(citizenship=digit)) is VIOLATION
        assert luhn_id_validate(corrupt_checksum(build_from_parts(citizenship=digit))) is VIOLATION

    def test_citizenship_reported_before_bad_date(self):
        # 32 January and citizenship 3.
        assert luhn_id_validate("8001325009387") is VIOLATION

    def test_bad_date_is_invalid_even_with_good_checksum(self):
        number = build_from_parts(dob="801332")
        assert luhn_id_validate(number) is INVALID

    def test_feb_29_in_non_leap_year_with_good_checksum(self):
        assert luhn_id_validate(build_from_parts(dob="010229")) is INVALID

    def test_feb_29_2000(self):
        assert luhn_id_validate(build_from_parts(dob="000229")) is VALID

    def test_length_gate_comes_first(self):
        # Would be a citizenship violation if long enough.
        assert luhn_id_validate("80010150093") is INVALID


class TestGarbageInput:
    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "abc",
            "\x00\x00\x00",
            "'; DROP TABLE ids; --",
            "８００１０１５００９０８７",
            "1" * 14,
            "9" * 1_000_000,
        ],
    )
    def test_never_raises(self, raw):
        assert luhn_id_validate(raw) is INVALID

    def test_deterministic(self):
        for number in ("8001015009087", "8001015009088", "8001015009387", ""):
            assert luhn_id_validate(number) is luhn_id_validate(number)


def test_logs_rejecting_gate_without_the_number(caplog):
    caplog.set_level(logging.DEBUG, logger="za_identity")
    luhn_id_validate("8001015009088")
    assert "checksum gate" in caplog.text
    assert "8001015009088" not in caplog.text


def test_all_thirteen_digit_citizen_ids_from_builder_validate():
    for sequence in ("0000", "4999", "5000", "9999"):
        assert luhn_id_validate(build_id("800101" + sequence + "08")) is VALID
