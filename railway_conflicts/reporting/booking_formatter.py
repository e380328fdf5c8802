"""
Booking Formatter

Formats booking statuses and conflict reports as plain text lines.
"""

import logging
from typing import List, Optional

from ..core.interfaces.i_conflict_resolver import ResolutionPolicy, ResolutionResult
from ..core.models.booking import Booking
from ..utils.helpers import get_status_summary


class BookingFormatter:
    """Formats engine output for console display."""

    def __init__(self, show_canceled_only: bool = False, show_notes: bool = True):
        """
        Initialize the booking formatter.

        Args:
            show_canceled_only: Only list cancelled bookings
            show_notes: Include informational notes in detection reports
        """
        self.logger = logging.getLogger(__name__)
        self.show_canceled_only = show_canceled_only
        self.show_notes = show_notes

    def format_booking(self, index: int, booking: Booking) -> List[str]:
        """
        Format one booking.

        Args:
            index: 0-based position of the booking in the input
            booking: The booking to format

        Returns:
            Lines describing the booking
        """
        label = f"Train {index + 1}"
        if booking.train_id:
            label = f"{label} [{booking.train_id}]"

        if booking.canceled:
            return [
                f"{label} is CANCELED.",
                f"  Reason: {booking.conflict_reason}",
            ]

        return [
            f"{label} is SCHEDULED.",
            f"  Station: {booking.station.id}",
            f"  Line: {booking.line.id} ({booking.line.line_type.value})",
            f"  Platform: {booking.platform.id} "
            f"(Freq: {booking.platform.frequency}min, "
            f"Access: {'Yes' if booking.platform.accessible else 'No'})",
            f"  Arrival Time: {booking.arrival_time}",
            f"  Train Type: {booking.train_type.value}",
        ]

    def format_booking_statuses(self, bookings: List[Booking]) -> List[str]:
        """Format every booking in input order, followed by a summary line."""
        lines: List[str] = []
        for index, booking in enumerate(bookings):
            if self.show_canceled_only and not booking.canceled:
                continue
            lines.extend(self.format_booking(index, booking))

        lines.append(f"Summary: {get_status_summary(bookings)}")
        return lines

    def format_detection_report(self, conflicts: List[str],
                                notes: Optional[List[str]] = None) -> List[str]:
        """Format the conflict list and, optionally, the notes."""
        if conflicts:
            lines = [f"{len(conflicts)} conflict(s) found:"]
            lines.extend(f"  - {conflict}" for conflict in conflicts)
        else:
            lines = ["No conflicts found."]

        if self.show_notes and notes:
            lines.append("Notes:")
            lines.extend(f"  - {note}" for note in notes)

        return lines

    def format_result(self, result: ResolutionResult) -> str:
        """Format a full resolution result as a single block of text."""
        if result.policy == ResolutionPolicy.DETECTION:
            lines = self.format_detection_report(result.conflicts, result.notes)
        else:
            lines = self.format_booking_statuses(result.bookings)

        header = f"Railway System Details ({result.policy.value} policy):"
        return "\n".join([header] + lines)
