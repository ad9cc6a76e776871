"""Pydantic models for API response validation.

This module contains pydantic models for validating JSON responses from:
- GitHub Release API (list releases)
"""

from .github_release import GithubRelease, GithubReleaseAsset, UtcTimestamp

__all__ = [
    'GithubRelease',
    'GithubReleaseAsset',
    'UtcTimestamp',
]
