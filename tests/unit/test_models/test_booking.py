"""
Unit tests for the Booking model and TrainType enum.
"""

import pytest

from railway_conflicts.core.exceptions import InvalidBookingError, ValidationError
from railway_conflicts.core.models import Booking, Platform, RailwayLine, Station, TrainType


class TestTrainType:
    """Test TrainType enum."""

    def test_train_type_values(self):
        """Test TrainType enum values."""
        assert TrainType.STOPPAGE.value == "Stoppage"
        assert TrainType.THROUGH.value == "Through"


class TestBooking:
    """Test Booking model."""

    def test_booking_defaults(self, make_booking):
        """Test that a new booking is not cancelled."""
        booking = make_booking()

        assert booking.canceled is False
        assert booking.conflict_reason is None
        assert booking.train_type == TrainType.STOPPAGE
        assert booking.is_stoppage
        assert not booking.is_through

    def test_booking_coerces_train_type(self, make_booking):
        """Test that string train types become enum members."""
        booking = make_booking(train_type="Through")

        assert booking.train_type is TrainType.THROUGH

    def test_booking_rejects_unknown_train_type(self, make_booking):
        """Test that an unknown train type is a validation error."""
        with pytest.raises(ValidationError):
            make_booking(train_type="Express")

    def test_cancel_sets_reason(self, make_booking):
        """Test cancel()."""
        booking = make_booking()
        booking.cancel("Assigned platform is inaccessible.")

        assert booking.canceled is True
        assert booking.conflict_reason == "Assigned platform is inaccessible."

    def test_ensure_complete_passes(self, make_booking):
        """Test that a fully wired booking is complete."""
        make_booking().ensure_complete()

    @pytest.mark.parametrize("missing", ["station", "line", "platform"])
    def test_ensure_complete_reports_missing_entity(self, missing):
        """Test that an unset entity raises InvalidBookingError."""
        entities = {
            "station": Station("S1"),
            "line": RailwayLine("RL01", "Express"),
            "platform": Platform("P1", 15),
        }
        entities[missing] = None
        booking = Booking(arrival_time="10:00", train_type="Stoppage", train_id="T9", **entities)

        with pytest.raises(InvalidBookingError) as exc_info:
            booking.ensure_complete()

        assert missing in str(exc_info.value)
        assert "T9" in str(exc_info.value)

    def test_to_dict(self, make_booking):
        """Test dictionary conversion."""
        data = make_booking(train_id="12951").to_dict()

        assert data["train_id"] == "12951"
        assert data["station"] == "S1"
        assert data["line"] == "RL01"
        assert data["platform"] == "P1"
        assert data["train_type"] == "Stoppage"
        assert data["canceled"] is False
