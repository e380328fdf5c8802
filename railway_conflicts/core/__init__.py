"""
Core Package

Core models, interfaces and services for the railway conflict resolver.
"""

# Import exceptions
from .exceptions import (
    RailwayError, ValidationError, InvalidBookingError,
    ConfigurationError, TimeFormatError
)

# Import models
from .models import (
    Platform, RailwayLine, LineType, Station, StationState, Booking, TrainType
)

# Import interfaces
from .interfaces import IConflictResolver, ResolutionPolicy, ResolutionResult

# Import services
from .services import (
    RailwayNetwork, EntityFactory, JsonBookingRepository, ConflictEngine,
    PriorityResolver, DetectionResolver, resolve_priority, detect_conflicts
)

__all__ = [
    # Exceptions
    'RailwayError',
    'ValidationError',
    'InvalidBookingError',
    'ConfigurationError',
    'TimeFormatError',

    # Models
    'Platform',
    'RailwayLine',
    'LineType',
    'Station',
    'StationState',
    'Booking',
    'TrainType',

    # Interfaces
    'IConflictResolver',
    'ResolutionPolicy',
    'ResolutionResult',

    # Services
    'RailwayNetwork',
    'EntityFactory',
    'JsonBookingRepository',
    'ConflictEngine',
    'PriorityResolver',
    'DetectionResolver',
    'resolve_priority',
    'detect_conflicts'
]
