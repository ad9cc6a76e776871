"""Build the immutable release index from a raw GitHub releases feed.

`build_index` is a pure function of its input: it validates each raw record,
drops records below the floor version and sorts what remains into the version
indices used by `release_catalog.query`.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime  # noqa: TC003
from types import MappingProxyType
from typing import Any

from semver import Version

from release_catalog.constants.standalone import FLOOR_VERSION
from release_catalog.models import GithubRelease, GithubReleaseAsset
from release_catalog.versioning import is_prerelease_version, normalize_version_string, parse_version

__all__ = ['Asset', 'ReleaseDetail', 'ReleaseIndex', 'build_index']

logger = logging.getLogger(__name__)

RawReleaseRecord = Mapping[str, Any] | GithubRelease


@dataclass(frozen=True, slots=True)
class Asset:
    """A downloadable file attached to a release."""

    content_type: str
    created_at: datetime
    id: int
    download_url: str
    name: str
    size: int
    state: str
    updated_at: datetime
    source_url: str


@dataclass(frozen=True, slots=True)
class ReleaseDetail:
    """Everything the catalog keeps about one release."""

    version: Version
    is_prerelease: bool
    id: int
    created_at: datetime
    published_at: datetime
    json_url: str
    source_url: str
    tarball_url: str
    zipball_url: str
    assets: tuple[Asset, ...]


@dataclass(frozen=True, slots=True)
class ReleaseIndex:
    """Sorted, de-duplicated view over every indexed release.

    `by_version_string` is keyed by the tag without its leading `v` and is a
    read-only mapping; the version tuples are strictly ascending.
    """

    floor_version: Version
    by_version_string: Mapping[str, ReleaseDetail]
    all_versions: tuple[Version, ...]
    release_versions: tuple[Version, ...]
    prerelease_versions: tuple[Version, ...]
    latest_version: Version | None
    latest_prerelease_version: Version | None

    def __len__(self) -> int:
        return len(self.by_version_string)


def _build_asset(asset: GithubReleaseAsset) -> Asset:
    return Asset(
        content_type=asset.content_type,
        created_at=asset.created_at,
        id=asset.id,
        download_url=asset.browser_download_url,
        name=asset.name,
        size=asset.size,
        state=asset.state,
        updated_at=asset.updated_at,
        source_url=asset.url,
    )


def _build_release_detail(version: Version, release: GithubRelease) -> ReleaseDetail:
    return ReleaseDetail(
        version=version,
        is_prerelease=is_prerelease_version(version),
        id=release.id,
        created_at=release.created_at,
        published_at=release.published_at,
        json_url=release.url,
        source_url=release.html_url,
        tarball_url=release.tarball_url,
        zipball_url=release.zipball_url,
        assets=tuple(_build_asset(asset) for asset in release.assets),
    )


def _tag_name(record: RawReleaseRecord) -> str:
    if isinstance(record, GithubRelease):
        return record.tag_name
    tag_name = record.get('tag_name')
    if not isinstance(tag_name, str):
        # Missing or mistyped, let pydantic report it.
        return GithubRelease.model_validate(record).tag_name
    return tag_name


def build_index(raw_records: Iterable[RawReleaseRecord], floor_version: Version | str = FLOOR_VERSION) -> ReleaseIndex:
    """Normalize raw release records into a `ReleaseIndex`.

    Records whose version is below `floor_version` (inclusive bound) are skipped.
    When two records normalize to the same version string the later one wins.

    Raises:
        InvalidVersionTagError: If a tag is not a semantic version.
        pydantic.ValidationError: If an indexed record is malformed, including
            timestamps that are not ISO-8601 with a zero UTC offset.
    """
    floor = parse_version(floor_version)
    details: dict[str, ReleaseDetail] = {}
    keys_by_version: dict[Version, str] = {}
    skipped = 0

    for record in raw_records:
        tag_name = _tag_name(record)
        version_string = normalize_version_string(tag_name)
        version = parse_version(version_string)

        if version < floor:
            skipped += 1
            logger.debug('Skipping release %s below floor version %s', tag_name, floor)
            continue

        release = record if isinstance(record, GithubRelease) else GithubRelease.model_validate(record)

        # Tags differing only in build metadata (`1.0.0+a`, `1.0.0+b`) have equal precedence.
        previous_key = keys_by_version.get(version)
        if previous_key is not None:
            logger.warning('Duplicate release for version %s, keeping the later record (id=%d)', version_string, release.id)
            del details[previous_key]
        keys_by_version[version] = version_string
        details[version_string] = _build_release_detail(version, release)

    all_versions = tuple(sorted(detail.version for detail in details.values()))
    release_versions = tuple(v for v in all_versions if not is_prerelease_version(v))
    prerelease_versions = tuple(v for v in all_versions if is_prerelease_version(v))

    logger.debug(
        'Indexed %d releases (%d stable, %d pre-releases), skipped %d below %s',
        len(all_versions), len(release_versions), len(prerelease_versions), skipped, floor,
    )

    return ReleaseIndex(
        floor_version=floor,
        by_version_string=MappingProxyType(details),
        all_versions=all_versions,
        release_versions=release_versions,
        prerelease_versions=prerelease_versions,
        latest_version=max(release_versions, default=None),
        latest_prerelease_version=max(prerelease_versions, default=None),
    )
