"""Read-only queries over a `ReleaseIndex`.

Every method is a pure function of the wrapped index and its arguments.
Versions can be given as `semver.Version` objects or as strings
(an optional leading `v` is stripped); both forms give identical answers.
"""

from collections.abc import Mapping
from enum import StrEnum

from semver import Version

from release_catalog.exceptions import InvalidReleaseKindError
from release_catalog.normalizer import ReleaseDetail, ReleaseIndex
from release_catalog.versioning import VersionRequirement, parse_requirement, try_parse_version

__all__ = ['ReleaseKind', 'ReleaseQuery']


class ReleaseKind(StrEnum):
    """Kinds of versions that can be listed separately."""

    RELEASE = 'release'
    PRERELEASE = 'prerelease'


class ReleaseQuery:
    """Stateless query facade over one immutable `ReleaseIndex`."""

    __slots__ = ('_all', '_details_by_version', '_index', '_prereleases', '_releases')

    def __init__(self, index: ReleaseIndex) -> None:
        self._index = index
        # Lookup tables derived from the index, never mutated.
        self._all = frozenset(index.all_versions)
        self._releases = frozenset(index.release_versions)
        self._prereleases = frozenset(index.prerelease_versions)
        self._details_by_version = {detail.version: detail for detail in index.by_version_string.values()}

    @property
    def index(self) -> ReleaseIndex:
        """The wrapped index."""
        return self._index

    # --- Predicates ---

    def is_prerelease(self, version: Version | str) -> bool:
        """Return True if `version` is a known pre-release (release candidate)."""
        return self._contains(self._prereleases, version)

    def is_release(self, version: Version | str) -> bool:
        """Return True if `version` is a known final release."""
        return self._contains(self._releases, version)

    def is_known_version(self, version: Version | str) -> bool:
        """Return True if `version` is known, whether final release or pre-release."""
        return self._contains(self._all, version)

    @staticmethod
    def _contains(versions: frozenset[Version], version: Version | str) -> bool:
        parsed = try_parse_version(version)
        return parsed is not None and parsed in versions

    # --- Latest versions ---

    def latest(self) -> Version | None:
        """Return the latest stable version, or None if the index holds no stable release."""
        return self._index.latest_version

    def latest_prerelease(self) -> Version | None:
        """Return the highest pre-release version, or None if there is none."""
        return self._index.latest_prerelease_version

    # --- Release data ---

    def get_release(self, version: Version | str) -> ReleaseDetail | None:
        """Return the details of one release, or None if `version` is unknown."""
        parsed = try_parse_version(version)
        if parsed is None:
            return None
        return self._details_by_version.get(parsed)

    def all_release_data(self) -> Mapping[str, ReleaseDetail]:
        """Return every indexed release keyed by version string (read-only)."""
        return self._index.by_version_string

    def prereleases(self) -> dict[str, ReleaseDetail]:
        """Return only the pre-releases, keyed by version string."""
        return {key: detail for key, detail in self._index.by_version_string.items() if detail.is_prerelease}

    def releases(self) -> dict[str, ReleaseDetail]:
        """Return only the final releases, keyed by version string."""
        return {key: detail for key, detail in self._index.by_version_string.items() if not detail.is_prerelease}

    def release_data_matching(
        self,
        requirement: VersionRequirement | str,
        *,
        allow_pre: bool = True,
    ) -> dict[str, ReleaseDetail]:
        """Return the releases whose version satisfies `requirement`.

        Args:
            requirement: A parsed requirement or a string such as `"~> 1.12"`.
            allow_pre: When False, pre-releases are excluded even if they are in range.

        Raises:
            InvalidVersionRequirementError: If `requirement` is a malformed string.
        """
        parsed = parse_requirement(requirement)
        return {
            key: detail
            for key, detail in self._index.by_version_string.items()
            if parsed.matches(detail.version, allow_pre=allow_pre)
        }

    # --- Listings ---

    def list_versions(self, kind: ReleaseKind | str | None = None) -> tuple[Version, ...]:
        """Return versions sorted ascending, optionally restricted to one `ReleaseKind`.

        Raises:
            InvalidReleaseKindError: If `kind` is not a known release kind.
        """
        if kind is None:
            return self._index.all_versions

        try:
            kind = ReleaseKind(kind)
        except ValueError as e:
            raise InvalidReleaseKindError(kind) from e

        match kind:
            case ReleaseKind.RELEASE:
                return self._index.release_versions
            case ReleaseKind.PRERELEASE:
                return self._index.prerelease_versions
