"""
Business logic managers for the railway conflict resolver.

This module contains configuration management and the schedule manager
that coordinates a resolution run.
"""

from .config_manager import ConfigManager, ConfigData, ResolutionConfig
from .schedule_manager import ScheduleManager

__all__ = [
    "ConfigManager",
    "ConfigData",
    "ResolutionConfig",
    "ScheduleManager",
]
