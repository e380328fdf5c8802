"""
Global pytest configuration and fixtures.
"""

import json
import os
import tempfile

import pytest

from railway_conflicts.core.models import Booking, Platform, RailwayLine, Station
from railway_conflicts.managers.config_manager import ConfigData


@pytest.fixture
def make_booking():
    """Build a booking with its station, line and platform wired together."""

    def _make_booking(
        platform_id="P1",
        arrival_time="10:00",
        train_type="Stoppage",
        station_id="S1",
        line_id="RL01",
        line_type="Express",
        frequency=15,
        accessible=True,
        train_id=None,
    ):
        station = Station(station_id)
        line = RailwayLine(line_id, line_type)
        platform = Platform(platform_id, frequency, accessible)
        station.add_line(line)
        line.add_station(station)
        station.add_platform(platform)
        station.validate()
        return Booking(
            station=station,
            line=line,
            platform=platform,
            arrival_time=arrival_time,
            train_type=train_type,
            train_id=train_id,
        )

    return _make_booking


@pytest.fixture
def booking_records():
    """Raw booking records as they appear in a bookings file."""
    return [
        {
            "train_id": "12951",
            "station": {"id": "NDLS"},
            "line": {"id": "RL01", "type": "Express"},
            "platform": {"id": "P1", "frequency": 15, "accessible": True},
            "arrival_time": "10:00",
            "train_type": "Stoppage",
        },
        {
            "train_id": "12952",
            "station": {"id": "NDLS"},
            "line": {"id": "RL02", "type": "Passenger"},
            "platform": {"id": "P1", "frequency": 15, "accessible": True},
            "arrival_time": "10:15",
            "train_type": "Through",
        },
        {
            "train_id": "22691",
            "station": {"id": "BCT"},
            "line": {"id": "RL03", "type": "Freight"},
            "platform": {"id": "P2", "frequency": 20, "accessible": True},
            "arrival_time": "11:00",
            "train_type": "Through",
        },
    ]


@pytest.fixture
def temp_bookings_file(booking_records):
    """Provide a temporary bookings file."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        json.dump({"bookings": booking_records}, f)
        temp_path = f.name

    yield temp_path

    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def temp_config_file():
    """Provide a temporary config file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
        config_data = {
            "resolution": {
                "policy": "priority",
                "stoppage_buffer_minutes": 30,
                "through_buffer_minutes": 10,
                "min_bookings": 2,
            },
            "display": {
                "show_canceled_only": False,
                "show_notes": True,
            },
            "logging": {
                "level": "WARNING",
                "log_to_file": False,
            },
        }
        json.dump(config_data, f)
        temp_path = f.name

    yield temp_path

    if os.path.exists(temp_path):
        os.unlink(temp_path)


@pytest.fixture
def test_config():
    """Provide a default configuration."""
    return ConfigData()
