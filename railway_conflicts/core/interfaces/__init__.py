"""
Core Interfaces Package

Interface definitions for the conflict resolution services.
"""

from .i_conflict_resolver import IConflictResolver, ResolutionPolicy, ResolutionResult

__all__ = [
    'IConflictResolver',
    'ResolutionPolicy',
    'ResolutionResult'
]
