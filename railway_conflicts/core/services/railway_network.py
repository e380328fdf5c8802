"""
Railway Network Registry

Single owner of Station, Line and Platform records, keyed by ID.
Relationships between stations and lines are made through IDs so that no
record owns another's lifetime.
"""

import logging
from typing import Dict, List, Optional

from ..models.platform import Platform
from ..models.railway_line import RailwayLine
from ..models.station import Station


class RailwayNetwork:
    """Registry of the stations, lines and platforms known to a run."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._stations: Dict[str, Station] = {}
        self._lines: Dict[str, RailwayLine] = {}
        self._platforms: Dict[str, Platform] = {}

    def add_station(self, station: Station) -> Station:
        """
        Register a station. The first record registered for an ID is kept.

        Returns:
            The stored station for this ID
        """
        stored = self._stations.setdefault(station.id, station)
        if stored is not station:
            self.logger.debug(f"Station {station.id} already registered, keeping first record")
        return stored

    def add_line(self, line: RailwayLine) -> RailwayLine:
        """Register a line, keeping the first record for an ID."""
        stored = self._lines.setdefault(line.id, line)
        if stored is not line:
            self.logger.debug(f"Line {line.id} already registered, keeping first record")
        return stored

    def add_platform(self, platform: Platform) -> Platform:
        """Register a platform, keeping the first record for an ID."""
        stored = self._platforms.setdefault(platform.id, platform)
        if stored is not platform:
            self.logger.debug(f"Platform {platform.id} already registered, keeping first record")
        return stored

    def connect(self, station_id: str, line_id: str) -> None:
        """
        Register a station and a line with each other.

        Raises:
            KeyError: If either ID is unknown
        """
        station = self._stations[station_id]
        line = self._lines[line_id]
        station.add_line(line)
        line.add_station(station)

    def attach_platform(self, station_id: str, platform_id: str) -> None:
        """
        Attach a registered platform to a registered station.

        Raises:
            KeyError: If either ID is unknown
        """
        self._stations[station_id].add_platform(self._platforms[platform_id])

    def get_station(self, station_id: str) -> Optional[Station]:
        return self._stations.get(station_id)

    def get_line(self, line_id: str) -> Optional[RailwayLine]:
        return self._lines.get(line_id)

    def get_platform(self, platform_id: str) -> Optional[Platform]:
        return self._platforms.get(platform_id)

    @property
    def stations(self) -> List[Station]:
        return list(self._stations.values())

    @property
    def lines(self) -> List[RailwayLine]:
        return list(self._lines.values())

    @property
    def platforms(self) -> List[Platform]:
        return list(self._platforms.values())

    def stations_on_line(self, line_id: str) -> List[Station]:
        """Get the registered stations served by a line."""
        line = self._lines.get(line_id)
        if line is None:
            return []
        return [self._stations[sid] for sid in line.stations if sid in self._stations]

    def validate(self) -> None:
        """
        Validate every registered station, promoting each to READY.

        Raises:
            ValidationError: If a station has no line attached
        """
        for station in self._stations.values():
            station.validate()
        self.logger.debug(
            f"Validated network: {len(self._stations)} stations, "
            f"{len(self._lines)} lines, {len(self._platforms)} platforms"
        )

    def __len__(self) -> int:
        return len(self._stations)
