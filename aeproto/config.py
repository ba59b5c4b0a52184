"""
AEPROTO Configuration Management

Handles loading and validation of configuration from TOML file.
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

import toml


# Default configuration path
DEFAULT_CONFIG_PATH = Path("/etc/aeproto/config.toml")

# Environment override for the configuration path
CONFIG_ENV_VAR = "AEPROTO_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Exception raised for invalid configuration."""
    pass


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[Path] = None
    decode_events: bool = True  # Log one record per decoded header


@dataclass
class Config:
    """
    Complete AEPROTO configuration.
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Path the configuration was loaded from
    config_path: Path = field(default_factory=lambda: DEFAULT_CONFIG_PATH)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from file.

        Args:
            config_path: Path to config file (default: $AEPROTO_CONFIG or
                /etc/aeproto/config.toml)

        Returns:
            Loaded configuration

        Raises:
            ConfigError: If the file cannot be parsed or holds invalid values
        """
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            config_path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

        path = Path(config_path)
        config = cls()
        config.config_path = path

        if not path.exists():
            return config

        try:
            data = toml.load(path)
        except (toml.TomlDecodeError, OSError) as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

        config._apply_dict(data)
        config.validate()
        return config

    def _apply_dict(self, data: Dict[str, Any]) -> None:
        """Apply dictionary data to config."""
        if "logging" in data:
            lg = data["logging"]
            if not isinstance(lg, dict):
                raise ConfigError("[logging] must be a table")
            if "level" in lg:
                self.logging.level = str(lg["level"]).upper()
            if "file" in lg:
                self.logging.file = Path(lg["file"])
            if "decode_events" in lg:
                if not isinstance(lg["decode_events"], bool):
                    raise ConfigError(
                        f"logging.decode_events must be true or false, got {lg['decode_events']!r}"
                    )
                self.logging.decode_events = lg["decode_events"]

    def validate(self) -> None:
        """
        Validate configuration.

        Raises:
            ConfigError: If configuration is invalid
        """
        if self.logging.level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.logging.level}")

        # Log directory must already exist
        if self.logging.file is not None and not self.logging.file.parent.is_dir():
            raise ConfigError(f"Log directory does not exist: {self.logging.file.parent}")
