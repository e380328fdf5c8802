"""
Configuration management for the railway conflict resolver.

This module handles loading, saving, and validating application configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from version import __version__, __app_name__
from ..core.exceptions import ConfigurationError
from ..core.interfaces.i_conflict_resolver import ResolutionPolicy

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ResolutionConfig(BaseModel):
    """Configuration for the conflict engine."""

    policy: str = Field(default="priority", description="priority or detection")
    stoppage_buffer_minutes: int = Field(
        default=30,
        ge=1,
        description="Minimum platform gap when a Stoppage train is involved"
    )
    through_buffer_minutes: int = Field(
        default=10,
        ge=1,
        description="Minimum platform gap between two Through trains"
    )
    min_bookings: int = Field(
        default=2,
        ge=2,
        description="Fewest bookings accepted for a conflict check"
    )

    @field_validator('policy')
    @classmethod
    def validate_policy(cls, v):
        """Validate resolution policy name."""
        allowed = [p.value for p in ResolutionPolicy]
        if v not in allowed:
            raise ValueError(f"Policy must be one of: {', '.join(allowed)}")
        return v

    def get_policy(self) -> ResolutionPolicy:
        return ResolutionPolicy(self.policy)


class DisplayConfig(BaseModel):
    """Configuration for report output."""

    show_canceled_only: bool = False
    show_notes: bool = True


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = "WARNING"
    log_to_file: bool = False

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        """Validate and normalise the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
        return level


class ConfigData(BaseModel):
    """Main configuration data model."""

    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """
    Manages application configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                platform default location
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/RailwayConflicts/config.json
        On Linux, uses XDG_CONFIG_HOME/RailwayConflicts/config.json or
        ~/.config/RailwayConflicts/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":  # Windows
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / __app_name__ / "config.json"
        else:
            xdg_config = os.environ.get("XDG_CONFIG_HOME")
            if xdg_config:
                return Path(xdg_config) / __app_name__ / "config.json"
            return Path.home() / ".config" / __app_name__ / "config.json"

        # Fallback to current directory for development
        return Path("config.json")

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(
                f"Config file doesn't exist, creating default at: {self.config_path}"
            )
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except Exception as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)

            self.config = config
            return True

        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        self.save_config(ConfigData())

    def update_policy(self, policy: str) -> None:
        """
        Update the default resolution policy and save to file.

        Args:
            policy: Policy name ("priority" or "detection")

        Raises:
            ConfigurationError: If the policy name is unknown
        """
        if self.config is None:
            self.load_config()

        try:
            self.config.resolution = ResolutionConfig(
                **{**self.config.resolution.model_dump(), "policy": policy}
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid resolution policy: {e}")

        self.save_config(self.config)
        logger.info(f"Resolution policy updated to {policy}")

    def get_config_summary(self) -> dict:
        """
        Get a summary of current configuration for display.

        Returns:
            dict: Configuration summary
        """
        if self.config is None:
            self.load_config()

        resolution = self.config.resolution
        return {
            "app_version": __version__,
            "policy": resolution.policy,
            "stoppage_buffer": f"{resolution.stoppage_buffer_minutes} minutes",
            "through_buffer": f"{resolution.through_buffer_minutes} minutes",
            "min_bookings": resolution.min_bookings,
            "log_level": self.config.logging.level,
        }
