"""Process-wide release catalog.

The catalog is built once (usually at startup) and then only read. Refreshing
builds a brand new index and publishes it with a single reference swap, so
readers that already hold a `ReleaseQuery` keep a consistent view and a failed
rebuild leaves the published catalog untouched.
"""

import logging
from collections.abc import Iterable

from semver import Version

from release_catalog.constants.standalone import FLOOR_VERSION
from release_catalog.exceptions import CatalogNotLoadedError
from release_catalog.feed import ReleasesFetchFailure, fetch_github_releases, load_releases_file
from release_catalog.normalizer import RawReleaseRecord, build_index
from release_catalog.query import ReleaseQuery
from release_catalog.settings import Settings, load_settings

__all__ = ['get_catalog', 'is_catalog_loaded', 'load_catalog', 'load_catalog_from_settings']

logger = logging.getLogger(__name__)

_current: ReleaseQuery | None = None  # pylint: disable=invalid-name


def load_catalog(raw_records: Iterable[RawReleaseRecord], floor_version: Version | str = FLOOR_VERSION) -> ReleaseQuery:
    """Build a new index from `raw_records` and publish it as the current catalog.

    Returns:
        The freshly published `ReleaseQuery`.
    """
    global _current  # pylint: disable=global-statement  # noqa: PLW0603

    query = ReleaseQuery(build_index(raw_records, floor_version))
    _current = query

    latest = query.latest()
    logger.info(
        'Release catalog loaded: %d versions, latest stable %s',
        len(query.index),
        latest if latest is not None else 'none',
    )
    return query


def get_catalog() -> ReleaseQuery:
    """Return the currently published catalog.

    Raises:
        CatalogNotLoadedError: If `load_catalog` has not succeeded yet.
    """
    if _current is None:
        raise CatalogNotLoadedError
    return _current


def is_catalog_loaded() -> bool:
    """Return True once a catalog has been published."""
    return _current is not None


def load_catalog_from_settings(settings: Settings | None = None) -> ReleaseQuery:
    """Read raw records from the configured source and publish a catalog built from them.

    The source is `settings.releases_file` when set, the GitHub releases API otherwise.

    Raises:
        requests.exceptions.RequestException: If the GitHub API could not be reached.
    """
    if settings is None:
        settings = load_settings()

    if settings.releases_file is not None:
        raw_records = load_releases_file(settings.releases_file)
    else:
        result = fetch_github_releases(
            releases_url=settings.releases_url,
            per_page=settings.per_page,
            max_pages=settings.max_pages,
        )
        if isinstance(result, ReleasesFetchFailure):
            raise result.exception
        raw_records = result.releases

    return load_catalog(raw_records, settings.floor_version)
