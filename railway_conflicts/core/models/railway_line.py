"""
Railway Line Model

Data model for a railway line and the stations it serves.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Union, TYPE_CHECKING
from enum import Enum

from ..exceptions import ValidationError

if TYPE_CHECKING:
    from .station import Station


class LineType(Enum):
    """Types of railway lines."""
    EXPRESS = "Express"
    PASSENGER = "Passenger"
    FREIGHT = "Freight"


@dataclass(frozen=True)
class RailwayLine:
    """
    Represents a railway line.

    The line keeps the IDs of the stations it serves rather than the station
    objects, so a Station and a Line never hold each other.
    """

    id: str
    line_type: Union[LineType, str] = field(compare=False)
    station_ids: Dict[str, None] = field(default_factory=dict, compare=False, repr=False)

    def __post_init__(self):
        """Validate railway line data."""
        if isinstance(self.line_type, LineType):
            return
        try:
            object.__setattr__(self, 'line_type', LineType(self.line_type))
        except ValueError:
            raise ValidationError(f"Invalid Line Type: {self.line_type}")

    def add_station(self, station: 'Station') -> None:
        """Register a station served by this line. Repeated IDs are ignored."""
        if station.id not in self.station_ids:
            self.station_ids[station.id] = None

    def has_station(self, station_id: str) -> bool:
        """Check if this line serves the given station."""
        return station_id in self.station_ids

    @property
    def stations(self) -> List[str]:
        """IDs of the stations served, in registration order."""
        return list(self.station_ids)

    def to_dict(self) -> Dict[str, Any]:
        """Convert railway line to dictionary representation."""
        return {
            "id": self.id,
            "line_type": self.line_type.value,
            "stations": self.stations,
        }

    def __str__(self) -> str:
        return f"{self.id} ({self.line_type.value})"

    def __repr__(self) -> str:
        return (f"RailwayLine(id='{self.id}', "
                f"type={self.line_type.value}, "
                f"stations={len(self.station_ids)})")

    def __contains__(self, station_id: str) -> bool:
        """Support 'in' operator for checking if station is on line."""
        return self.has_station(station_id)
