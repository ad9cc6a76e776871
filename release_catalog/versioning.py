"""Semantic version parsing and requirement matching on top of `semver`.

Release tags follow the semantic-versioning grammar
(MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]) and are parsed into `semver.Version`,
so ordering is full semver precedence: numeric identifiers compare
numerically, alphanumeric ones in ASCII order, and any pre-release sorts below
its final release.

Requirements use the Elixir-style syntax found in release tooling:

    ~> 1.12                      >= 1.12.0 and < 2.0.0-0
    ~> 1.12.1                    >= 1.12.1 and < 1.13.0-0
    >= 1.10.0 and < 1.13.0
    1.11.4 or ~> 1.13

Every comparison is evaluated with semver ordering, so `< 1.13.0` matches
`1.13.0-rc.0`.
"""

import operator
import re
from collections.abc import Callable
from dataclasses import dataclass

from semver import Version

from release_catalog.exceptions import InvalidVersionRequirementError, InvalidVersionTagError

__all__ = [
    'Comparison',
    'VersionRequirement',
    'is_prerelease_version',
    'normalize_version_string',
    'parse_requirement',
    'parse_version',
    'try_parse_version',
]

# `~>` also accepts a MAJOR.MINOR version.
_PARTIAL_VERSION_RE = re.compile(r'^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)$')

_OR_SPLIT_RE = re.compile(r'\s+or\s+')
_AND_SPLIT_RE = re.compile(r'\s+and\s+')
_COMPARISON_RE = re.compile(r'^(?P<op>~>|==|!=|>=|<=|>|<)?\s*(?P<version>\S+)$')

_OPERATORS: dict[str, Callable[[Version, Version], bool]] = {
    '==': operator.eq,
    '!=': operator.ne,
    '>=': operator.ge,
    '<=': operator.le,
    '>': operator.gt,
    '<': operator.lt,
}

# Lowest possible pre-release, used as the exclusive upper bound of `~>`.
_LOWEST_PRERELEASE = '0'


def normalize_version_string(tag: str) -> str:
    """Strip a single leading `v` from a release tag (`v1.13.0` -> `1.13.0`)."""
    return tag.removeprefix('v')


def parse_version(value: Version | str) -> Version:
    """Parse a tag or version string into a `Version`; `Version` instances pass through.

    Raises:
        InvalidVersionTagError: If the string is not a semantic version.
    """
    if isinstance(value, Version):
        return value

    try:
        return Version.parse(normalize_version_string(value))
    except ValueError as e:
        raise InvalidVersionTagError(value) from e


def try_parse_version(value: Version | str) -> Version | None:
    """Like `parse_version`, but return None instead of raising for malformed strings."""
    try:
        return parse_version(value)
    except InvalidVersionTagError:
        return None


def is_prerelease_version(version: Version) -> bool:
    """Return True if `version` carries a pre-release component (`1.13.0-rc.0`, `1.14.0-1`)."""
    return version.prerelease is not None


@dataclass(frozen=True, slots=True)
class Comparison:
    """One `<operator> <version>` term of a requirement."""

    operator: str
    version: Version

    def matches(self, version: Version) -> bool:
        return _OPERATORS[self.operator](version, self.version)


@dataclass(frozen=True, slots=True)
class VersionRequirement:
    """A parsed version requirement: `or`-ed clauses of `and`-ed comparisons."""

    source: str
    clauses: tuple[tuple[Comparison, ...], ...]

    def matches(self, version: Version, *, allow_pre: bool = True) -> bool:
        """Return True if `version` satisfies every comparison of at least one clause.

        With `allow_pre=False` pre-release versions never match, even when in range.
        """
        if not allow_pre and is_prerelease_version(version):
            return False
        return any(all(comparison.matches(version) for comparison in clause) for clause in self.clauses)

    def __str__(self) -> str:
        return self.source


def _parse_requirement_version(requirement: str, version_string: str) -> Version:
    try:
        return Version.parse(version_string)
    except ValueError as e:
        raise InvalidVersionRequirementError(requirement, f'invalid version {version_string!r}') from e


def _compile_pessimistic(requirement: str, version_string: str) -> tuple[Comparison, ...]:
    partial = _PARTIAL_VERSION_RE.match(version_string)
    if partial is not None:
        lower = Version(int(partial['major']), int(partial['minor']), 0)
        upper = Version(lower.major + 1, 0, 0, prerelease=_LOWEST_PRERELEASE)
    else:
        lower = _parse_requirement_version(requirement, version_string)
        upper = Version(lower.major, lower.minor + 1, 0, prerelease=_LOWEST_PRERELEASE)
    return (Comparison('>=', lower), Comparison('<', upper))


def _compile_comparison(requirement: str, text: str) -> tuple[Comparison, ...]:
    match = _COMPARISON_RE.match(text)
    if match is None:
        raise InvalidVersionRequirementError(requirement, f'cannot parse {text!r}')

    op = match['op'] or '=='
    if op == '~>':
        return _compile_pessimistic(requirement, match['version'])
    return (Comparison(op, _parse_requirement_version(requirement, match['version'])),)


def parse_requirement(requirement: VersionRequirement | str) -> VersionRequirement:
    """Parse an Elixir-style requirement string; `VersionRequirement` instances pass through.

    Raises:
        InvalidVersionRequirementError: If the requirement is empty or malformed.
    """
    if isinstance(requirement, VersionRequirement):
        return requirement

    text = requirement.strip()
    if not text:
        raise InvalidVersionRequirementError(requirement, 'empty requirement')

    clauses = tuple(
        tuple(
            comparison
            for term in _AND_SPLIT_RE.split(clause)
            for comparison in _compile_comparison(requirement, term.strip())
        )
        for clause in _OR_SPLIT_RE.split(text)
    )
    return VersionRequirement(source=text, clauses=clauses)
