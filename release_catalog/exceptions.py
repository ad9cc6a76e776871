"""Release catalog custom exceptions.

Parse errors raised here are fatal: they signal a broken upstream contract
(a malformed tag in the feed) or a programming error (a malformed requirement),
and are never swallowed by the catalog itself.
"""


class InvalidVersionTagError(ValueError):
    """Raised when a release tag or version string is not a valid semantic version."""

    def __init__(self, tag: str) -> None:
        """Initialize the exception with the offending tag.

        Args:
            tag: The tag or version string that failed to parse.
        """
        super().__init__(f'Invalid semantic version tag: {tag!r}')
        self.tag = tag


class InvalidVersionRequirementError(ValueError):
    """Raised when a version requirement string cannot be parsed."""

    def __init__(self, requirement: str, reason: str | None = None) -> None:
        """Initialize the exception with the offending requirement.

        Args:
            requirement: The requirement string that failed to parse.
            reason: Optional details about which part was rejected.
        """
        message = f'Invalid version requirement: {requirement!r}'
        if reason:
            message += f' ({reason})'
        super().__init__(message)
        self.requirement = requirement


class InvalidReleaseKindError(ValueError):
    """Raised when listing versions by an unknown release kind."""

    def __init__(self, kind: object) -> None:
        """Initialize the exception with the unknown kind."""
        super().__init__(f'Unknown release kind: {kind!r} (expected "release" or "prerelease")')


class CatalogNotLoadedError(RuntimeError):
    """Raised when the process-wide catalog is read before it has been built."""

    def __init__(self) -> None:
        """Initialize the exception with a default message."""
        super().__init__('The release catalog has not been loaded yet, call load_catalog() first.')
