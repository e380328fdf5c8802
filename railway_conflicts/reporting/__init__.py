"""
Reporting Package

Plain-text formatting of booking statuses and conflict reports.
"""

from .booking_formatter import BookingFormatter

__all__ = ["BookingFormatter"]
