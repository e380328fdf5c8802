"""
Entity Factory

Builds validated Station, Line, Platform and Booking records from raw
dictionaries such as those loaded from a bookings JSON file.

A booking record looks like::

    {
        "train_id": "12951",
        "station": {"id": "NDLS"},
        "line": {"id": "RL01", "type": "Express"},
        "platform": {"id": "P1", "frequency": 15, "accessible": true},
        "arrival_time": "10:00",
        "train_type": "Stoppage"
    }
"""

import logging
from typing import Any, Dict, List, Optional

from ..exceptions import ValidationError
from ..models.booking import Booking
from ..models.platform import Platform
from ..models.railway_line import RailwayLine
from ..models.station import Station
from ..validation import Validator
from .railway_network import RailwayNetwork


class EntityFactory:
    """Creates entities through a shared RailwayNetwork registry."""

    def __init__(self, network: Optional[RailwayNetwork] = None):
        """
        Initialize the entity factory.

        Args:
            network: Registry to build into, a new one is created if None
        """
        self.network = network if network is not None else RailwayNetwork()
        self.logger = logging.getLogger(__name__)

    def create_station(self, station_id: str) -> Station:
        """
        Create or reuse a station.

        Station IDs may be a display name (``New Delhi``) or a code (``NDLS``).

        Raises:
            ValidationError: If the ID matches neither rule
        """
        if not (Validator.is_valid_name(station_id) or Validator.is_valid_code(station_id)):
            raise ValidationError(f"Invalid Station ID: {station_id!r}")
        existing = self.network.get_station(station_id)
        if existing is not None:
            return existing
        return self.network.add_station(Station(station_id))

    def create_line(self, line_id: str, line_type: str) -> RailwayLine:
        """
        Create a line for one booking record.

        Every call builds a new line carrying the type it was given. The
        network registry keeps the first line registered under ``line_id``.

        Raises:
            ValidationError: If the ID is not a code or the type is unknown
        """
        if not Validator.is_valid_code(line_id):
            raise ValidationError(f"Invalid Line ID: {line_id!r}")
        line = RailwayLine(line_id, line_type)
        self.network.add_line(line)
        return line

    def create_platform(self, platform_id: str, frequency: int, accessible: bool = True) -> Platform:
        """
        Create a platform for one booking record.

        Every call builds a new platform carrying its own frequency and
        accessibility. The network registry keeps the first platform
        registered under ``platform_id``.

        Raises:
            ValidationError: If the ID is not a code, the frequency is out of
                range or ``accessible`` is not a bool
        """
        if not Validator.is_valid_code(platform_id):
            raise ValidationError(f"Invalid Platform ID: {platform_id!r}")
        platform = Platform(platform_id, frequency, accessible)
        self.network.add_platform(platform)
        return platform

    def build_booking(self, record: Dict[str, Any]) -> Booking:
        """
        Build one booking and wire its entities together.

        The booking holds the line and platform built from its own record.
        The station's line and platform collections keep the first record
        attached for each ID.

        Missing station, line or platform sections leave that reference unset;
        the conflict engine rejects such bookings.

        Raises:
            ValidationError: If a section holds invalid values or a required
                field is missing
        """
        try:
            station = self._station_from(record.get("station"))
            line = self._line_from(record.get("line"))
            platform = self._platform_from(record.get("platform"))
            arrival_time = record["arrival_time"]
            train_type = record["train_type"]
        except KeyError as e:
            raise ValidationError(f"Booking record is missing field {e}")

        if station is not None and line is not None:
            self.network.connect(station.id, line.id)
            line.add_station(station)
        if station is not None and platform is not None:
            self.network.attach_platform(station.id, platform.id)

        return Booking(
            station=station,
            line=line,
            platform=platform,
            arrival_time=arrival_time,
            train_type=train_type,
            train_id=record.get("train_id"),
        )

    def build_bookings(self, records: List[Dict[str, Any]]) -> List[Booking]:
        """
        Build bookings in input order and validate their stations.

        Stations of bookings without a line are left as drafts.

        Returns:
            List of bookings in the order of ``records``
        """
        bookings = [self.build_booking(record) for record in records]

        for booking in bookings:
            if booking.station is not None and booking.line is not None:
                booking.station.validate()

        self.logger.info(
            f"Built {len(bookings)} bookings over {len(self.network)} stations"
        )
        return bookings

    def _station_from(self, section: Any) -> Optional[Station]:
        if section is None:
            return None
        if isinstance(section, str):
            return self.create_station(section)
        return self.create_station(section["id"])

    def _line_from(self, section: Any) -> Optional[RailwayLine]:
        if section is None:
            return None
        return self.create_line(section["id"], section["type"])

    def _platform_from(self, section: Any) -> Optional[Platform]:
        if section is None:
            return None
        return self.create_platform(
            section["id"],
            section["frequency"],
            section.get("accessible", True),
        )
