"""
Platform Model

Immutable record for a station platform.
"""

from dataclasses import dataclass, field
from typing import Dict, Any

from ..exceptions import ValidationError
from ..validation import Validator


@dataclass(frozen=True)
class Platform:
    """
    Immutable data class representing a platform.

    Equality and hashing use the platform ID only.
    """

    id: str
    frequency: int = field(compare=False)
    accessible: bool = field(default=True, compare=False)

    def __post_init__(self):
        """Validate platform data after initialization."""
        if not Validator.is_valid_frequency(self.frequency):
            raise ValidationError(f"Invalid Frequency: {self.frequency}")
        if not isinstance(self.accessible, bool):
            raise ValidationError(f"Invalid Accessibility: {self.accessible!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert platform to dictionary representation."""
        return {
            "id": self.id,
            "frequency": self.frequency,
            "accessible": self.accessible,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Platform':
        """Create Platform from dictionary representation."""
        return cls(
            id=data["id"],
            frequency=data["frequency"],
            accessible=data.get("accessible", True),
        )

    def __str__(self) -> str:
        return self.id

    def __repr__(self) -> str:
        return (f"Platform(id='{self.id}', frequency={self.frequency}, "
                f"accessible={self.accessible})")
