"""Sources of raw release records (GitHub API, JSON snapshots)."""

from .releases_fetcher import fetch_github_releases, load_releases_file
from .result_types import ReleasesFetchFailure, ReleasesFetchResult, ReleasesFetchSuccess

__all__ = [
    'ReleasesFetchFailure',
    'ReleasesFetchResult',
    'ReleasesFetchSuccess',
    'fetch_github_releases',
    'load_releases_file',
]
