"""Catalog settings, read from an optional TOML file.

Example `settings.toml`:

    [catalog]
    floor_version = "1.0.0"
    releases_file = "~/snapshots/elixir_releases.json"

Every key is optional; a missing file means all defaults.
"""
import logging
from pathlib import Path

import toml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from release_catalog.constants.local import SETTINGS_PATH
from release_catalog.constants.standalone import FLOOR_VERSION, GITHUB_RELEASES_API_URL
from release_catalog.versioning import parse_version

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Validated `[catalog]` table of the settings file."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    floor_version: str = FLOOR_VERSION
    releases_url: str = GITHUB_RELEASES_API_URL
    # When set, raw records are read from this JSON snapshot instead of the GitHub API.
    releases_file: Path | None = None
    per_page: int = Field(default=100, ge=1, le=100)
    max_pages: int = Field(default=20, ge=1)

    @field_validator('floor_version')
    @classmethod
    def _check_floor_version(cls, value: str) -> str:
        parse_version(value)
        return value

    @field_validator('releases_file')
    @classmethod
    def _expand_releases_file(cls, value: Path | None) -> Path | None:
        return value.expanduser() if value is not None else None


def load_settings(path: Path | str = SETTINGS_PATH) -> Settings:
    """Load settings from `path`, falling back to defaults when the file does not exist.

    Raises:
        toml.TomlDecodeError: If the file is not valid TOML.
        pydantic.ValidationError: If the `[catalog]` table holds invalid values.
    """
    settings_path = Path(path)
    if not settings_path.is_file():
        logger.debug('No settings file at %s, using defaults', settings_path)
        return Settings()

    data = toml.load(settings_path)
    return Settings.model_validate(data.get('catalog', {}))
