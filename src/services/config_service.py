"""Configuration Service using domain models."""

import json
from pathlib import Path

from domain.config import Config
from domain.exceptions import BingWallpaperError, ServiceError
from services.base import BaseService


class ConfigService(BaseService):
    """Service for loading and saving client configuration as JSON."""

    def __init__(self, config_file: Path | None = None) -> None:
        """Initialize configuration service.

        Args:
            config_file: Path to config file (defaults to ~/.config/bingwall/config.json)
        """
        super().__init__()
        self.config_file = (
            config_file or Path.home() / ".config" / "bingwall" / "config.json"
        )
        self.config_dir = self.config_file.parent
        self._config: Config | None = None

    def _ensure_config_exists(self) -> None:
        """Create config directory and default config if they don't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)

        if not self.config_file.exists():
            self.log_info(f"Creating default config at {self.config_file}")
            with open(self.config_file, "w") as f:
                json.dump(Config().to_dict(), f, indent=4)

    def load_config(self) -> Config:
        """Load configuration from file and return domain model.

        Returns:
            Config domain model with validated state

        Raises:
            ServiceError: If config file cannot be read or holds invalid values
        """
        try:
            self._ensure_config_exists()
            with open(self.config_file) as f:
                config_data = json.load(f)
            config = Config.from_dict(config_data)
            config.validate()
        except (
            json.JSONDecodeError,
            OSError,
            AttributeError,
            TypeError,
            BingWallpaperError,
        ) as e:
            self.log_error(
                f"Failed to load config from {self.config_file}: {e}", exc_info=True
            )
            raise ServiceError(f"Failed to load configuration: {e}") from e

        self._config = config
        self.log_debug(f"Loaded config from {self.config_file}")
        return config

    def save_config(self, config: Config) -> None:
        """Save configuration domain model to file.

        Raises:
            ServiceError: If the config is invalid or cannot be written
        """
        try:
            config.validate()
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, "w") as f:
                json.dump(config.to_dict(), f, indent=4)
        except (BingWallpaperError, OSError) as e:
            self.log_error(
                f"Failed to save config to {self.config_file}: {e}", exc_info=True
            )
            raise ServiceError(f"Failed to save configuration: {e}") from e

        self._config = config
        self.log_info(f"Saved config to {self.config_file}")

    def get_config(self) -> Config:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            return self.load_config()
        return self._config
