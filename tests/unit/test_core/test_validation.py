"""
Unit tests for the Validator rules and arrival time parsing.
"""

import pytest

from railway_conflicts.core.arrival_time import minutes_between, parse_arrival_minutes
from railway_conflicts.core.exceptions import TimeFormatError
from railway_conflicts.core.validation import Validator


class TestValidator:
    """Test name, code and frequency rules."""

    @pytest.mark.parametrize("name", ["New Delhi", "Ab", "Station 9", "A" * 50])
    def test_valid_names(self, name):
        assert Validator.is_valid_name(name)

    @pytest.mark.parametrize("name", ["", "A", "9 Lane", " Delhi", "Delhi-Cantt", "A" * 51, None])
    def test_invalid_names(self, name):
        assert not Validator.is_valid_name(name)

    @pytest.mark.parametrize("code", ["P1", "RL01", "ABC123", "A0"])
    def test_valid_codes(self, code):
        assert Validator.is_valid_code(code)

    @pytest.mark.parametrize("code", ["p1", "RL", "01", "ABCD1", "AB1234", "RL-01", ""])
    def test_invalid_codes(self, code):
        assert not Validator.is_valid_code(code)

    def test_frequency_bounds(self):
        """Test that the frequency rule is inclusive on both ends."""
        assert Validator.is_valid_frequency(10)
        assert Validator.is_valid_frequency(30)
        assert not Validator.is_valid_frequency(9)
        assert not Validator.is_valid_frequency(31)
        assert not Validator.is_valid_frequency(True)
        assert not Validator.is_valid_frequency("15")


class TestArrivalTime:
    """Test HH:MM parsing."""

    def test_parse_basic(self):
        assert parse_arrival_minutes("00:00") == 0
        assert parse_arrival_minutes("10:15") == 615
        assert parse_arrival_minutes("23:59") == 1439

    @pytest.mark.parametrize("value", ["9:05", "10:5", "1015", "ab:cd", "10:15 ", "24:00", "12:60", "", None])
    def test_parse_rejects_malformed(self, value):
        with pytest.raises(TimeFormatError):
            parse_arrival_minutes(value)

    def test_minutes_between_is_absolute(self):
        assert minutes_between("10:00", "10:15") == 15
        assert minutes_between("10:15", "10:00") == 15
        assert minutes_between("08:00", "08:00") == 0
