"""
Conflict Resolver Interface

Defines the contract shared by the platform conflict resolution policies.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..models.booking import Booking


class ResolutionPolicy(Enum):
    """Selectable conflict resolution strategies."""
    PRIORITY = "priority"
    DETECTION = "detection"


@dataclass
class ResolutionResult:
    """Outcome of one resolution run."""

    policy: ResolutionPolicy
    bookings: List[Booking]
    conflicts: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    @property
    def canceled(self) -> List[Booking]:
        """Bookings cancelled by the run, in input order."""
        return [booking for booking in self.bookings if booking.canceled]

    @property
    def has_conflicts(self) -> bool:
        """Check if the run cancelled a booking or reported a conflict."""
        return bool(self.conflicts) or bool(self.canceled)


class IConflictResolver(ABC):
    """Interface for conflict resolution policies."""

    policy: ResolutionPolicy

    @abstractmethod
    def resolve(self, bookings: List[Booking]) -> ResolutionResult:
        """
        Resolve conflicts among an ordered list of bookings.

        Args:
            bookings: Bookings in input order; the order decides report
                numbering and tie-breaks

        Returns:
            ResolutionResult for the run

        Raises:
            InvalidBookingError: If a booking references an unset entity
            TimeFormatError: If an arrival time cannot be parsed
        """
        pass
