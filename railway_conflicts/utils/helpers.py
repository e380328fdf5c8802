"""
Helper utility functions for the railway conflict resolver.

This module contains time formatting helpers and a few summaries over
booking lists.
"""

from typing import List, Dict

from ..core.arrival_time import parse_arrival_minutes, minutes_between
from ..core.models.booking import Booking

__all__ = [
    "parse_arrival_minutes",
    "minutes_between",
    "format_minutes",
    "sort_bookings_by_arrival",
    "calculate_booking_stats",
    "get_status_summary",
]


def format_minutes(total_minutes: int) -> str:
    """
    Format minutes after midnight as HH:MM.

    Args:
        total_minutes: Minutes in the range 0-1439

    Returns:
        str: Formatted time string
    """
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def sort_bookings_by_arrival(bookings: List[Booking]) -> List[Booking]:
    """Sort bookings by arrival time without changing the input list."""
    return sorted(bookings, key=lambda b: parse_arrival_minutes(b.arrival_time))


def calculate_booking_stats(bookings: List[Booking]) -> Dict[str, int]:
    """
    Count bookings by outcome and train type.

    Args:
        bookings: List of bookings

    Returns:
        dict: Totals for scheduled, cancelled, stoppage and through trains
    """
    canceled = sum(1 for booking in bookings if booking.canceled)
    stoppage = sum(1 for booking in bookings if booking.is_stoppage)

    return {
        "total_trains": len(bookings),
        "scheduled": len(bookings) - canceled,
        "canceled": canceled,
        "stoppage": stoppage,
        "through": len(bookings) - stoppage,
    }


def get_status_summary(bookings: List[Booking]) -> str:
    """
    Get a summary string of booking outcomes.

    Args:
        bookings: List of bookings

    Returns:
        str: Status summary string
    """
    if not bookings:
        return "No trains"

    stats = calculate_booking_stats(bookings)

    parts = []
    if stats["scheduled"] > 0:
        parts.append(f"{stats['scheduled']} scheduled")
    if stats["canceled"] > 0:
        parts.append(f"{stats['canceled']} canceled")

    return ", ".join(parts)
