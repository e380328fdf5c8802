"""
Schedule management for the railway conflict resolver.

This module coordinates the steps of a resolution run: building validated
bookings from raw records, checking the booking count, and handing the
bookings to the conflict engine with the configured policy.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.exceptions import ConfigurationError
from ..core.interfaces.i_conflict_resolver import ResolutionPolicy, ResolutionResult
from ..core.models.booking import Booking
from ..core.services.conflict_engine import ConflictEngine
from ..core.services.entity_factory import EntityFactory
from ..core.services.railway_network import RailwayNetwork
from .config_manager import ConfigData

logger = logging.getLogger(__name__)


class ScheduleManager:
    """
    Coordinates entity construction and conflict resolution.

    Errors are not caught here; the calling layer decides how to report them.
    """

    def __init__(self, config: Optional[ConfigData] = None):
        """
        Initialize schedule manager.

        Args:
            config: Application configuration, defaults if None
        """
        self.config = config if config is not None else ConfigData()
        self.network = RailwayNetwork()
        self.factory = EntityFactory(self.network)

        resolution = self.config.resolution
        self.engine = ConflictEngine(
            default_policy=resolution.get_policy(),
            stoppage_buffer=resolution.stoppage_buffer_minutes,
            through_buffer=resolution.through_buffer_minutes,
        )

        logger.debug(f"ScheduleManager initialized with {resolution.policy} policy")

    def build_bookings(self, records: List[Dict[str, Any]]) -> List[Booking]:
        """Build bookings in input order through the shared network."""
        return self.factory.build_bookings(records)

    def ensure_minimum_bookings(self, bookings: List[Booking]) -> None:
        """
        Check that enough bookings were supplied for a conflict check.

        Raises:
            ConfigurationError: If fewer than the configured minimum are given
        """
        minimum = self.config.resolution.min_bookings
        if len(bookings) < minimum:
            raise ConfigurationError(
                f"At least {minimum} trains are required for conflict checking, "
                f"got {len(bookings)}."
            )

    def resolve(self, bookings: List[Booking],
                policy: Optional[ResolutionPolicy] = None) -> ResolutionResult:
        """
        Run the conflict engine over already-built bookings.

        Args:
            bookings: Bookings in input order
            policy: Policy override, the configured policy if None
        """
        self.ensure_minimum_bookings(bookings)
        result = self.engine.resolve(bookings, policy)
        logger.info(
            f"{result.policy.value} run over {len(bookings)} bookings: "
            f"{len(result.canceled)} cancelled, {len(result.conflicts)} conflicts"
        )
        return result

    def run(self, records: List[Dict[str, Any]],
            policy: Optional[ResolutionPolicy] = None) -> ResolutionResult:
        """
        Build bookings from raw records and resolve them.

        Args:
            records: Raw booking records in input order
            policy: Policy override, the configured policy if None

        Returns:
            ResolutionResult for the run
        """
        bookings = self.build_bookings(records)
        return self.resolve(bookings, policy)
