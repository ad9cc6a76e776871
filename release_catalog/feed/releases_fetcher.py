"""Raw release feed sources: the GitHub releases API and local JSON snapshots.

Neither function builds an index, they only hand raw records to
`release_catalog.normalizer.build_index`.
"""

import json
import logging
from pathlib import Path
from typing import Any

import requests
from pydantic import TypeAdapter

from release_catalog.constants.standalone import GITHUB_RELEASES_API_URL
from release_catalog.feed.http_session import session as default_http_session
from release_catalog.feed.result_types import ReleasesFetchFailure, ReleasesFetchResult, ReleasesFetchSuccess

logger = logging.getLogger(__name__)

_RAW_RELEASES_ADAPTER = TypeAdapter(list[dict[str, Any]])

DEFAULT_PER_PAGE = 100
DEFAULT_MAX_PAGES = 20
DEFAULT_TIMEOUT = 10


def fetch_github_releases(
    *,
    session: requests.Session = default_http_session,
    releases_url: str = GITHUB_RELEASES_API_URL,
    per_page: int = DEFAULT_PER_PAGE,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> ReleasesFetchResult:
    """Fetch every page of the GitHub "list releases" endpoint.

    Pages are requested until one comes back short or empty, or `max_pages` is reached.

    Returns:
        ReleasesFetchSuccess with the raw records, or ReleasesFetchFailure on any HTTP error.

    Raises:
        pydantic.ValidationError: If a page is not a JSON array of objects.
    """
    releases: list[dict[str, Any]] = []

    for page in range(1, max_pages + 1):
        try:
            response = session.get(releases_url, params={'per_page': per_page, 'page': page}, timeout=DEFAULT_TIMEOUT)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.warning('Failed to fetch releases page %d from %s: %s', page, releases_url, e)
            return ReleasesFetchFailure(
                exception=e,
                url=releases_url,
                http_code=getattr(e.response, 'status_code', None),
            )

        page_releases = _RAW_RELEASES_ADAPTER.validate_python(response.json())
        releases.extend(page_releases)

        if len(page_releases) < per_page:
            break
    else:
        logger.warning('Stopped fetching releases from %s after %d pages', releases_url, max_pages)

    logger.info('Fetched %d raw release records from %s', len(releases), releases_url)
    return ReleasesFetchSuccess(releases=releases)


def load_releases_file(path: Path | str) -> list[dict[str, Any]]:
    """Load raw release records from a JSON snapshot of the "list releases" response.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
        pydantic.ValidationError: If the document is not an array of objects.
    """
    raw_data = json.loads(Path(path).read_text(encoding='utf-8'))
    return _RAW_RELEASES_ADAPTER.validate_python(raw_data)
