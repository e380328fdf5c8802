"""
Station Model

Data model for a railway station with its attached lines and platforms.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, Optional

from ..exceptions import ValidationError
from .platform import Platform
from .railway_line import RailwayLine


class StationState(Enum):
    """Lifecycle of a station record."""
    DRAFT = "draft"
    READY = "ready"


@dataclass(eq=False)
class Station:
    """
    A railway station.

    A station starts as a DRAFT and becomes READY once ``validate()`` has
    confirmed that at least one line is attached. Lines and platforms are
    keyed by ID and the first record inserted for an ID is kept.
    """

    id: str
    lines: Dict[str, RailwayLine] = field(default_factory=dict)
    platforms: Dict[str, Platform] = field(default_factory=dict)
    state: StationState = StationState.DRAFT

    def add_line(self, line: RailwayLine) -> None:
        """Attach a line. Adding an ID that is already present is a no-op."""
        if line.id not in self.lines:
            self.lines[line.id] = line

    def add_platform(self, platform: Platform) -> None:
        """Attach a platform. Adding an ID that is already present is a no-op."""
        if platform.id not in self.platforms:
            self.platforms[platform.id] = platform

    def validate(self) -> 'Station':
        """
        Check the station invariants and promote it to READY.

        Returns:
            The station itself

        Raises:
            ValidationError: If no line is attached
        """
        if not self.lines:
            raise ValidationError("Station needs at least one line.")
        self.state = StationState.READY
        return self

    @property
    def is_ready(self) -> bool:
        """Check if the station has passed validation."""
        return self.state == StationState.READY

    def serves_line(self, line_id: str) -> bool:
        """Check if this station serves a specific railway line."""
        return line_id in self.lines

    def get_platform(self, platform_id: str) -> Optional[Platform]:
        return self.platforms.get(platform_id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert station to dictionary representation."""
        return {
            "id": self.id,
            "state": self.state.value,
            "lines": list(self.lines),
            "platforms": [p.to_dict() for p in self.platforms.values()],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Station):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return (f"Station(id='{self.id}', lines={list(self.lines)}, "
                f"platforms={list(self.platforms)}, state={self.state.value})")
