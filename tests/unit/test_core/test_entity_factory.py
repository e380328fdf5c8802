"""
Unit tests for EntityFactory.

Tests building validated entities and bookings from raw records.
"""

import pytest

from railway_conflicts.core.exceptions import ValidationError
from railway_conflicts.core.models import LineType, TrainType
from railway_conflicts.core.services.entity_factory import EntityFactory


class TestEntityCreation:
    """Test single-entity creation and ID rules."""

    def test_station_accepts_name_or_code(self):
        factory = EntityFactory()

        assert factory.create_station("New Delhi").id == "New Delhi"
        assert factory.create_station("NDLS").id == "NDLS"

    @pytest.mark.parametrize("station_id", ["", "9th Street", "S", "New-Delhi"])
    def test_station_rejects_bad_id(self, station_id):
        with pytest.raises(ValidationError) as exc_info:
            EntityFactory().create_station(station_id)

        assert "Invalid Station ID" in str(exc_info.value)

    def test_line_requires_code(self):
        with pytest.raises(ValidationError) as exc_info:
            EntityFactory().create_line("Main Line", "Express")

        assert "Invalid Line ID" in str(exc_info.value)

    def test_line_rejects_bad_type(self):
        with pytest.raises(ValidationError) as exc_info:
            EntityFactory().create_line("RL01", "Local")

        assert "Invalid Line Type" in str(exc_info.value)

    def test_platform_requires_code(self):
        with pytest.raises(ValidationError):
            EntityFactory().create_platform("platform one", 15)

    def test_platform_rejects_bad_frequency(self):
        with pytest.raises(ValidationError):
            EntityFactory().create_platform("P1", 45)

    def test_repeated_ids_keep_record_attributes(self):
        """Test that each call builds its own entity from its own values."""
        factory = EntityFactory()
        first = factory.create_line("RL01", "Express")
        second = factory.create_line("RL01", "Freight")

        assert second is not first
        assert second.line_type == LineType.FREIGHT
        assert factory.network.get_line("RL01") is first

        platform = factory.create_platform("P1", 15, True)
        other = factory.create_platform("P1", 30, False)
        assert other.frequency == 30
        assert other.accessible is False
        assert factory.network.get_platform("P1") is platform

    @pytest.mark.parametrize("accessible", ["false", "0", 1])
    def test_platform_accessibility_must_be_bool(self, accessible):
        with pytest.raises(ValidationError) as exc_info:
            EntityFactory().create_platform("P1", 15, accessible)

        assert "Invalid Accessibility" in str(exc_info.value)


class TestBuildBookings:
    """Test booking construction from raw records."""

    def test_build_bookings_preserves_order(self, booking_records):
        bookings = EntityFactory().build_bookings(booking_records)

        assert [b.train_id for b in bookings] == ["12951", "12952", "22691"]
        assert bookings[0].train_type == TrainType.STOPPAGE
        assert bookings[1].arrival_time == "10:15"

    def test_build_bookings_wires_entities(self, booking_records):
        factory = EntityFactory()
        bookings = factory.build_bookings(booking_records)

        station = factory.network.get_station("NDLS")
        assert bookings[0].station is station
        assert bookings[1].station is station
        assert set(station.lines) == {"RL01", "RL02"}
        assert list(station.platforms) == ["P1"]
        assert factory.network.get_line("RL01").stations == ["NDLS"]
        assert station.is_ready

    def test_shared_platform_keeps_each_record(self, booking_records):
        """Two records on one platform ID keep their own accessibility."""
        booking_records[1]["platform"]["accessible"] = False
        factory = EntityFactory()
        bookings = factory.build_bookings(booking_records)

        assert bookings[0].platform.accessible is True
        assert bookings[1].platform.accessible is False
        assert factory.network.get_station("NDLS").get_platform("P1").accessible is True

    def test_string_accessibility_rejected(self, booking_records):
        booking_records[0]["platform"]["accessible"] = "false"

        with pytest.raises(ValidationError):
            EntityFactory().build_bookings(booking_records)

    def test_station_given_as_string(self, booking_records):
        booking_records[0]["station"] = "NDLS"
        bookings = EntityFactory().build_bookings(booking_records)

        assert bookings[0].station.id == "NDLS"

    def test_missing_section_leaves_entity_unset(self, booking_records):
        del booking_records[2]["platform"]
        bookings = EntityFactory().build_bookings(booking_records)

        assert bookings[2].platform is None
        assert bookings[2].station.is_ready

    def test_missing_line_leaves_station_draft(self, booking_records):
        del booking_records[2]["line"]
        bookings = EntityFactory().build_bookings(booking_records)

        assert bookings[2].line is None
        assert not bookings[2].station.is_ready

    def test_missing_required_field(self, booking_records):
        del booking_records[0]["arrival_time"]

        with pytest.raises(ValidationError) as exc_info:
            EntityFactory().build_bookings(booking_records)

        assert "arrival_time" in str(exc_info.value)

    def test_unknown_train_type(self, booking_records):
        booking_records[1]["train_type"] = "Goods"

        with pytest.raises(ValidationError):
            EntityFactory().build_bookings(booking_records)
