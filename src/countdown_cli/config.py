"""Configuration management for the countdown CLI."""

import json
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

APP_NAME = "countdown_cli"


class TimerConfig(BaseModel):
    """User defaults for a countdown session.

    Command-line options take precedence over these values.
    """

    duration_seconds: int = Field(default=120, ge=0)
    title: str = Field(default="countdown")
    style: str = Field(default="mocha")
    notify: bool = Field(default=True)
    poll_interval_ms: int = Field(default=200, ge=10, le=2000)
    tagline_interval_seconds: float = Field(default=5.0, gt=0)
    pomodoro_seconds: int = Field(default=1500, gt=0)


class ConfigManager:
    """Loads and saves the countdown configuration file."""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = config_dir or Path(user_config_dir(APP_NAME))
        self.config_file = self.config_dir / "config.json"
        self._config: Optional[TimerConfig] = None

    @property
    def config(self) -> TimerConfig:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> TimerConfig:
        """Load configuration from file, falling back to defaults."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
                return TimerConfig(**data)
            except (OSError, ValueError, TypeError, ValidationError):
                # Corrupted or invalid config: run with defaults
                return TimerConfig()
        return TimerConfig()

    def save_config(self, config: Optional[TimerConfig] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by name."""
        return getattr(self.config, key, None)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by name and persist it.

        Raises:
            KeyError: If the key is not a known setting
            ValidationError: If the value is invalid for the key
        """
        if key not in TimerConfig.model_fields:
            raise KeyError(key)

        data = self.config.model_dump()
        data[key] = value
        self._config = TimerConfig(**data)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset one setting, or all of them, to defaults."""
        if key is None:
            self._config = TimerConfig()
        else:
            if key not in TimerConfig.model_fields:
                raise KeyError(key)
            self.set(key, TimerConfig.model_fields[key].default)
        self.save_config()


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
