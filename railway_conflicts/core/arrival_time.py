"""
Arrival time parsing.

Arrival times are same-day, zero-padded 24-hour ``HH:MM`` strings.
"""

import re

from .exceptions import TimeFormatError

ARRIVAL_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})$")


def parse_arrival_minutes(arrival_time: str) -> int:
    """
    Convert an HH:MM arrival time to minutes after midnight.

    There is no timezone or day roll-over handling.

    Args:
        arrival_time: Zero-padded 24-hour time such as "09:05"

    Returns:
        int: hour * 60 + minute

    Raises:
        TimeFormatError: If the value is not a valid HH:MM time
    """
    if not isinstance(arrival_time, str):
        raise TimeFormatError(f"Invalid arrival time: {arrival_time!r}")

    match = ARRIVAL_TIME_PATTERN.fullmatch(arrival_time)
    if match is None:
        raise TimeFormatError(
            f"Invalid arrival time '{arrival_time}', expected HH:MM"
        )

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise TimeFormatError(f"Arrival time out of range: '{arrival_time}'")

    return hours * 60 + minutes


def minutes_between(first: str, second: str) -> int:
    """Absolute difference in minutes between two HH:MM times."""
    return abs(parse_arrival_minutes(first) - parse_arrival_minutes(second))
