"""Shared fixtures: raw GitHub release records and the index built from them."""
import logging
from collections.abc import Iterator
from typing import Any

import pytest

from release_catalog import catalog
from release_catalog.logging_setup import CATALOG_LOGGER_NAME
from release_catalog.normalizer import ReleaseIndex, build_index
from release_catalog.query import ReleaseQuery

API_URL = 'https://api.github.com/repos/elixir-lang/elixir'
HTML_URL = 'https://github.com/elixir-lang/elixir'


def make_asset(tag: str, name: str, asset_id: int, **overrides: Any) -> dict[str, Any]:
    asset = {
        'content_type': 'application/zip',
        'id': asset_id,
        'url': f'{API_URL}/releases/assets/{asset_id}',
        'browser_download_url': f'{HTML_URL}/releases/download/{tag}/{name}',
        'name': name,
        'size': 5_502_033,
        'state': 'uploaded',
        'created_at': '2021-05-28T15:51:16Z',
        'updated_at': '2021-05-28T15:51:54Z',
        'uploader': {'login': 'josevalim'},
    }
    asset.update(overrides)
    return asset


def make_release(tag: str, release_id: int, **overrides: Any) -> dict[str, Any]:
    """Build a raw record shaped like one entry of GitHub's "list releases" response."""
    release = {
        'tag_name': tag,
        'id': release_id,
        'url': f'{API_URL}/releases/{release_id}',
        'html_url': f'{HTML_URL}/releases/tag/{tag}',
        'tarball_url': f'{API_URL}/tarball/{tag}',
        'zipball_url': f'{API_URL}/zipball/{tag}',
        'created_at': '2021-05-28T15:34:14Z',
        'published_at': '2021-05-28T15:51:54Z',
        'draft': False,
        'prerelease': '-' in tag,
        'assets': [
            make_asset(tag, 'Docs.zip', release_id * 10),
            make_asset(tag, 'Precompiled.zip', release_id * 10 + 1),
        ],
    }
    release.update(overrides)
    return release


@pytest.fixture
def raw_releases() -> list[dict[str, Any]]:
    # Newest first, the way the GitHub API lists them.
    return [
        make_release('v1.13.0', 5),
        make_release('v1.13.0-rc.0', 4),
        make_release('v1.12.1', 3),
        make_release('v1.12.0', 2),
        make_release('v0.9.9', 1),
    ]


@pytest.fixture
def index(raw_releases: list[dict[str, Any]]) -> ReleaseIndex:
    return build_index(raw_releases)


@pytest.fixture
def query(index: ReleaseIndex) -> ReleaseQuery:
    return ReleaseQuery(index)


@pytest.fixture
def unloaded_catalog(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(catalog, '_current', None)


@pytest.fixture
def catalog_logger() -> Iterator[logging.Logger]:
    """The package logger, restored to its unconfigured state afterwards."""
    logger = logging.getLogger(CATALOG_LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
