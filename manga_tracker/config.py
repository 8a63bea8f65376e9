"""Configuration management for the manga tracker.

Handles application configuration from environment variables, an optional
YAML config file, and default settings. Provides structured configuration
classes for page fetching, storage and logging.
"""

from pathlib import Path

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class FetchConfig(BaseSettings):
    """HTTP settings for fetching manga pages.

    Attributes:
        timeout: Total request timeout in seconds.
        user_agent: User-Agent header sent with every request.
        max_connections: Maximum simultaneous connections per session.
    """
    timeout: float = Field(default=3.0, validation_alias="FETCH_TIMEOUT")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, validation_alias="FETCH_USER_AGENT")
    max_connections: int = Field(default=5, validation_alias="FETCH_MAX_CONNECTIONS")


class StorageConfig(BaseSettings):
    """Chapter record storage configuration.

    Attributes:
        db_path: Path to SQLite database file.
    """
    db_path: str = Field(default="data/manga.db", validation_alias="MANGA_DB_PATH")


class LoggingConfig(BaseSettings):
    """Logging configuration.

    Attributes:
        level: Root log level name.
    """
    level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


class Config:
    """Application configuration manager.

    Environment variables take precedence over values from ``tracker.yml``,
    which in turn override the built-in defaults.
    """

    def __init__(self, config_dir: Path | None = None):
        """Initialize configuration manager.

        Args:
            config_dir: Path to configuration directory, defaults to manga_tracker/config.
        """
        if config_dir is None:
            config_dir = Path(__file__).parent / "config"

        self.config_dir = Path(config_dir)

        self.storage = StorageConfig()
        self.logging = LoggingConfig()

        tracker_path = self.config_dir / "tracker.yml"
        if tracker_path.exists():
            with open(tracker_path) as f:
                tracker_data = yaml.safe_load(f) or {}

            fetch_data = tracker_data.get("fetch", {})
            # Init kwargs beat env vars in pydantic-settings, so only pass
            # YAML values the environment does not already set.
            defaults = FetchConfig()
            explicit = defaults.model_fields_set
            self.fetch = FetchConfig(**{
                alias: value
                for name, alias, value in (
                    ("timeout", "FETCH_TIMEOUT", fetch_data.get("timeout")),
                    ("user_agent", "FETCH_USER_AGENT", fetch_data.get("user_agent")),
                    ("max_connections", "FETCH_MAX_CONNECTIONS", fetch_data.get("max_connections")),
                )
                if value is not None and name not in explicit
            })
        else:
            self.fetch = FetchConfig()


# Global configuration instance
config = Config()
