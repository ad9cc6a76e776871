"""Result types for release feed fetch attempts."""

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class ReleasesFetchFailure:
    """Outcome of a releases fetch attempt that failed."""
    exception: Exception
    url: str
    http_code: int | None


@dataclass(slots=True)
class ReleasesFetchSuccess:
    """Outcome of a releases fetch attempt that succeeded."""
    releases: list[dict[str, Any]]


ReleasesFetchResult = ReleasesFetchFailure | ReleasesFetchSuccess
