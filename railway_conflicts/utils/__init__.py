"""
Utility functions for the railway conflict resolver.

This module contains helper functions and utilities used throughout
the application.
"""

from .helpers import parse_arrival_minutes, minutes_between, format_minutes

__all__ = ["parse_arrival_minutes", "minutes_between", "format_minutes"]
