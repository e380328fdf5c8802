"""
Core Services Package

Service implementations for the railway conflict resolver.
"""

from .railway_network import RailwayNetwork
from .entity_factory import EntityFactory
from .json_booking_repository import JsonBookingRepository
from .conflict_engine import (
    ConflictEngine,
    PriorityResolver,
    DetectionResolver,
    CancellationCandidate,
    resolve_priority,
    detect_conflicts,
    shared_platform_conflicts
)

__all__ = [
    'RailwayNetwork',
    'EntityFactory',
    'JsonBookingRepository',
    'ConflictEngine',
    'PriorityResolver',
    'DetectionResolver',
    'CancellationCandidate',
    'resolve_priority',
    'detect_conflicts',
    'shared_platform_conflicts'
]
