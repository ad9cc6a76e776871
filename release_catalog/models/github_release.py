"""Pydantic models for GitHub Release API responses.

This module validates the raw release feed consumed by the normalizer.
Timestamps must be ISO-8601 strings with a zero UTC offset; anything else is
rejected with a `pydantic.ValidationError`.
"""

from datetime import datetime, timedelta
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _parse_utc_timestamp(value: object) -> datetime:
    if isinstance(value, str):
        # `fromisoformat` accepts the trailing "Z" GitHub uses since Python 3.11
        value = datetime.fromisoformat(value)
    if not isinstance(value, datetime):
        raise ValueError(f'expected an ISO-8601 string, got {type(value).__name__}')  # noqa: TRY004
    if value.utcoffset() != timedelta(0):
        raise ValueError(f'timestamp must be in UTC with a zero offset, got {value.isoformat()}')
    return value


UtcTimestamp = Annotated[datetime, BeforeValidator(_parse_utc_timestamp)]


class GithubReleaseAsset(BaseModel):
    """Model for a single asset in a GitHub release."""

    model_config = ConfigDict(frozen=True)

    content_type: str
    id: int = Field(ge=0)
    url: str
    browser_download_url: str
    name: str
    size: int = Field(ge=0)
    state: str
    created_at: UtcTimestamp
    updated_at: UtcTimestamp


class GithubRelease(BaseModel):
    """Model for one entry of the GitHub "list releases" response.

    Only the fields the catalog indexes are declared, any other key is ignored.
    """

    model_config = ConfigDict(frozen=True)

    tag_name: str
    id: int = Field(ge=0)
    url: str
    html_url: str
    tarball_url: str
    zipball_url: str
    created_at: UtcTimestamp
    published_at: UtcTimestamp
    assets: list[GithubReleaseAsset] = Field(min_length=1)
