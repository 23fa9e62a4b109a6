"""Per-owner activity configuration loaded from ``activity.yaml``.

Example:
    ```yaml
    github:
      commits:
        acme:
          token_env: ACME_GITHUB_TOKEN
          include: [widgets, "tool-*"]
          exclude: [legacy-*]
          since: 2023-01
          skip_months:
            widgets: [2024-02]
      issues:
        acme:
          token: ghp_literal_token
    ```
"""

import logging
import os
import re
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ghexport.exceptions import AuthenticationError, ConfigurationError
from ghexport.models.activity import ActivityType

logger = logging.getLogger(__name__)

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})$")


def _parse_month(value: Any) -> tuple[int, int]:
    match = _MONTH_PATTERN.match(str(value).strip())
    if not match:
        raise ValueError(f"expected YYYY-MM, got {value!r}")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"month out of range in {value!r}")
    return year, month


class OwnerSettings(BaseModel):
    """Token reference and repository rules for one owner."""

    model_config = ConfigDict(extra="ignore")

    token: str | None = None
    token_env: str | None = None
    include: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=list)
    since: tuple[int, int] | None = None
    until: tuple[int, int] | None = None
    skip_months: dict[str, list[tuple[int, int]]] = Field(default_factory=dict)

    @field_validator("since", "until", mode="before")
    @classmethod
    def _month_bound(cls, value: Any) -> tuple[int, int] | None:
        if value is None or isinstance(value, tuple):
            return value
        return _parse_month(value)

    @field_validator("skip_months", mode="before")
    @classmethod
    def _skip_months(cls, value: Any) -> dict[str, list[tuple[int, int]]]:
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError("skip_months must map repository names to month lists")
        return {
            str(repo): [_parse_month(m) for m in (months or [])]
            for repo, months in value.items()
        }

    def resolve_token(self, default: str | None = None) -> str:
        """Resolve the access token: literal, then environment variable, then default."""
        if self.token:
            return self.token
        if self.token_env:
            value = os.getenv(self.token_env)
            if value:
                return value
            logger.warning("Environment variable %s is not set", self.token_env)
        if default:
            return default
        raise AuthenticationError(
            "No GitHub token configured. Set token or token_env in activity.yaml, "
            "or export GITHUB_TOKEN."
        )

    def should_generate(self, repo: str, year: int, month: int) -> bool:
        """Check whether a repository/month combination is included."""
        if self.include and not any(fnmatchcase(repo, p) for p in self.include):
            return False
        if any(fnmatchcase(repo, p) for p in self.exclude):
            return False
        if self.since is not None and (year, month) < self.since:
            return False
        if self.until is not None and (year, month) > self.until:
            return False
        return (year, month) not in self.skip_months.get(repo, [])


class ActivityConfig(BaseModel):
    """The ``github`` section of ``activity.yaml``."""

    commits: dict[str, OwnerSettings] | None = None
    issues: dict[str, OwnerSettings] | None = None
    path: str | None = None

    @field_validator("commits", "issues", mode="before")
    @classmethod
    def _owners(cls, value: Any) -> dict[str, Any] | None:
        if value is None:
            return None
        if not isinstance(value, dict):
            raise ValueError("must map owner names to settings")
        return {str(owner): settings or {} for owner, settings in value.items()}

    @classmethod
    def load(cls, path: Path) -> "ActivityConfig":
        """Load and validate an activity configuration file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or lacks
                a ``github`` mapping
        """
        if not path.is_file():
            raise ConfigurationError(f"Activity configuration not found: {path}", str(path))

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}", str(path)) from e

        github = data.get("github") if isinstance(data, dict) else None
        if not isinstance(github, dict):
            raise ConfigurationError(
                f"Invalid config structure: github section not found in {path}", str(path)
            )

        try:
            config = cls(**github, path=str(path))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid activity configuration in {path}: {e}", str(path)) from e

        logger.debug("Loaded activity configuration from %s", path)
        return config

    def owners_for(self, activity_type: ActivityType) -> dict[str, OwnerSettings]:
        """Get the owner map for an activity type."""
        owners = getattr(self, activity_type.value)
        if owners is None:
            raise ConfigurationError(
                f"Invalid config structure: github.{activity_type.value} not found",
                self.path,
            )
        return owners

    def owner_names(self, activity_type: ActivityType) -> list[str]:
        """List configured owners for an activity type, in file order."""
        return list(self.owners_for(activity_type))

    def owner_settings(self, activity_type: ActivityType, owner: str) -> OwnerSettings:
        """Get settings for one owner.

        Raises:
            ConfigurationError: If the owner is not configured
        """
        owners = self.owners_for(activity_type)
        if owner not in owners:
            raise ConfigurationError(
                f"Owner {owner} not found in activity configuration", self.path
            )
        return owners[owner]
