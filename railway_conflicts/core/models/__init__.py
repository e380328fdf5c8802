"""
Core Models Package

Entity and booking records for the railway conflict resolver.
"""

from .platform import Platform
from .railway_line import RailwayLine, LineType
from .station import Station, StationState
from .booking import Booking, TrainType

__all__ = [
    'Platform',
    'RailwayLine',
    'LineType',
    'Station',
    'StationState',
    'Booking',
    'TrainType'
]
