"""
Booking data model.

A booking assigns one train to a station, line and platform at an arrival
time. Its cancellation state is written only by the conflict engine.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union, Dict, Any

from ..exceptions import InvalidBookingError, ValidationError
from .platform import Platform
from .railway_line import RailwayLine
from .station import Station


class TrainType(Enum):
    """Enumeration of train service types used for platform priority."""

    STOPPAGE = "Stoppage"
    THROUGH = "Through"


@dataclass
class Booking:
    """
    A single train's platform assignment.

    Station, line and platform are shared references; several bookings may
    point at the same entity.
    """

    station: Optional[Station]
    line: Optional[RailwayLine]
    platform: Optional[Platform]
    arrival_time: str
    train_type: Union[TrainType, str]
    canceled: bool = False
    conflict_reason: Optional[str] = None
    train_id: Optional[str] = None

    def __post_init__(self):
        """Coerce the train type to the enum."""
        if not isinstance(self.train_type, TrainType):
            try:
                self.train_type = TrainType(self.train_type)
            except ValueError:
                raise ValidationError(f"Invalid Train Type: {self.train_type}")

    @property
    def is_stoppage(self) -> bool:
        return self.train_type == TrainType.STOPPAGE

    @property
    def is_through(self) -> bool:
        return self.train_type == TrainType.THROUGH

    def ensure_complete(self) -> None:
        """
        Check that every referenced entity is set.

        Raises:
            InvalidBookingError: If the station, line or platform is missing
        """
        missing = [
            name for name, value in (
                ("station", self.station),
                ("line", self.line),
                ("platform", self.platform),
            )
            if value is None
        ]
        if missing:
            label = self.train_id or "booking"
            raise InvalidBookingError(
                f"{label} has no {', '.join(missing)} assigned"
            )

    def cancel(self, reason: str) -> None:
        """Mark the booking as cancelled with the given reason."""
        self.canceled = True
        self.conflict_reason = reason

    def to_dict(self) -> Dict[str, Any]:
        """Convert booking to dictionary representation."""
        return {
            "train_id": self.train_id,
            "station": self.station.id if self.station else None,
            "line": self.line.id if self.line else None,
            "platform": self.platform.id if self.platform else None,
            "arrival_time": self.arrival_time,
            "train_type": self.train_type.value,
            "canceled": self.canceled,
            "conflict_reason": self.conflict_reason,
        }
