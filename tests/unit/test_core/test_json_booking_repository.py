"""
Unit tests for JsonBookingRepository using real temporary files.
"""

import json
import os
import tempfile

import pytest

from railway_conflicts.core.exceptions import ConfigurationError
from railway_conflicts.core.services.json_booking_repository import JsonBookingRepository


def _write_temp(content: str) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False) as f:
        f.write(content)
        return f.name


class TestJsonBookingRepository:
    """Test loading booking records."""

    def test_load_wrapped_records(self, temp_bookings_file, booking_records):
        records = JsonBookingRepository(temp_bookings_file).load_records()

        assert records == booking_records

    def test_load_bare_list(self, booking_records):
        path = _write_temp(json.dumps(booking_records))
        try:
            assert JsonBookingRepository(path).load_records() == booking_records
        finally:
            os.unlink(path)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "missing.json")

            with pytest.raises(ConfigurationError) as exc_info:
                JsonBookingRepository(path).load_records()

        assert "not found" in str(exc_info.value)

    def test_invalid_json(self):
        path = _write_temp("{ not json")
        try:
            with pytest.raises(ConfigurationError) as exc_info:
                JsonBookingRepository(path).load_records()

            assert "Invalid JSON in bookings file" in str(exc_info.value)
        finally:
            os.unlink(path)

    @pytest.mark.parametrize("content", ['{"trains": []}', '"bookings"', '[1, 2]'])
    def test_wrong_shape(self, content):
        path = _write_temp(content)
        try:
            with pytest.raises(ConfigurationError):
                JsonBookingRepository(path).load_records()
        finally:
            os.unlink(path)
