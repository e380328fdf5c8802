"""
Railway Exceptions

Error taxonomy shared by the entity model, the conflict engine and the
calling layer.
"""


class RailwayError(Exception):
    """Base class for all railway domain errors."""

    pass


class ValidationError(RailwayError):
    """Raised when an entity violates one of its construction invariants."""

    pass


class InvalidBookingError(RailwayError):
    """Raised when a booking references an unset station, line or platform."""

    pass


class ConfigurationError(RailwayError):
    """Exception raised for configuration-related errors."""

    pass


class TimeFormatError(RailwayError):
    """Raised when an arrival time is not a zero-padded HH:MM value."""

    pass
