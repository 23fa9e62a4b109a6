"""Configuration management for ghexport."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass
class Config:
    """Application configuration."""

    github_token: str | None
    github_api_url: str = "https://api.github.com"

    # Filesystem layout
    config_directory: Path = Path(".")
    activity_directory: Path = Path("activity")

    # Timezone used for month windows and display dates
    timezone: str = "UTC"

    # Pagination
    default_per_page: int = 100

    # Timeouts
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        # GHEXPORT_TOKEN (preferred) and GITHUB_TOKEN (fallback) are only
        # used when an owner's activity config names no token of its own
        token = os.getenv("GHEXPORT_TOKEN") or os.getenv("GITHUB_TOKEN")

        return cls(
            github_token=token,
            github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            config_directory=Path(os.getenv("GHEXPORT_CONFIG_DIR", ".")),
            activity_directory=Path(os.getenv("GHEXPORT_ACTIVITY_DIR", "activity")),
            timezone=os.getenv("GHEXPORT_TIMEZONE", "UTC"),
        )

    @property
    def activity_config_path(self) -> Path:
        """Path of the per-owner activity configuration file."""
        return self.config_directory / "activity.yaml"

    @property
    def development_directory(self) -> Path:
        """Root directory holding the year/month report folders."""
        return self.activity_directory / "development"


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
