"""
Validation rules for railway identifiers and platform frequencies.

These checks are used by the entity factory before any record is built;
the entity classes themselves only enforce their own invariants.
"""

import re

NAME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9 ]{1,49}$")
CODE_PATTERN = re.compile(r"^[A-Z]{1,3}[0-9]{1,3}$")

MIN_FREQUENCY = 10
MAX_FREQUENCY = 30


class Validator:
    """Static validation helpers for names, codes and frequencies."""

    @staticmethod
    def is_valid_name(name: str) -> bool:
        """Check a display name: a letter followed by 1-49 letters, digits or spaces."""
        if not isinstance(name, str):
            return False
        return NAME_PATTERN.fullmatch(name) is not None

    @staticmethod
    def is_valid_code(code: str) -> bool:
        """Check an identifier code such as ``RL01`` or ``P1``."""
        if not isinstance(code, str):
            return False
        return CODE_PATTERN.fullmatch(code) is not None

    @staticmethod
    def is_valid_frequency(frequency: int) -> bool:
        """Check a platform stop frequency in minutes."""
        if isinstance(frequency, bool) or not isinstance(frequency, int):
            return False
        return MIN_FREQUENCY <= frequency <= MAX_FREQUENCY
