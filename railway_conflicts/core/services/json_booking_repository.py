"""
JSON Booking Repository

Loads raw booking records from a JSON file. Records are returned as plain
dictionaries; building entities from them is the entity factory's job.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from ..exceptions import ConfigurationError


class JsonBookingRepository:
    """Reads booking records from ``{"bookings": [...]}`` or a bare list."""

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the repository.

        Args:
            path: Path to the bookings JSON file
        """
        self.path = Path(path)
        self.logger = logging.getLogger(__name__)

    def load_records(self) -> List[Dict[str, Any]]:
        """
        Load booking records in file order.

        Raises:
            ConfigurationError: If the file is missing, malformed or has the
                wrong shape
        """
        self.logger.debug(f"Loading bookings from: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Bookings file not found: {self.path}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in bookings file at line {e.lineno}, column {e.colno}: {e.msg}"
            )

        if isinstance(data, dict):
            data = data.get("bookings")

        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise ConfigurationError(
                f"Bookings file {self.path} must contain a list of booking objects"
            )

        self.logger.info(f"Loaded {len(data)} booking records from {self.path}")
        return data
