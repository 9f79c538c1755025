"""Exception hierarchy for lslrtree.

Every error raised on purpose by the package derives from LsLRError, so
callers at a session boundary can report any of them as a single line and
carry on.
"""

from typing import Optional


class LsLRError(Exception):
    """Base class for all lslrtree errors."""
    pass


class ListingError(LsLRError):
    """Raised when a listing cannot be turned into a tree."""
    pass


class MalformedListingLine(ListingError):
    """Raised when a line inside a block does not have the expected shape."""

    def __init__(self, line: str, lineno: Optional[int] = None,
                 reason: Optional[str] = None):
        self.line = line
        self.lineno = lineno
        self.reason = reason or "malformed listing line"
        location = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"{self.reason}{location} - {line}")


class EmptyListingError(ListingError):
    """Raised when the listing does not contain a single block."""

    def __init__(self, message: str = "listing contains no directory blocks"):
        super().__init__(message)


class PathResolutionError(LsLRError):
    """Raised when a path cannot be resolved against the tree."""
    pass


class UnknownDirectoryEntry(PathResolutionError):
    """Raised when a directory has no child with the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"no such file or directory - {name}")


class InvalidPathSegment(PathResolutionError):
    """Raised when a path descends into something that is not a directory."""

    def __init__(self, name: str, path: str):
        self.name = name
        self.path = path
        super().__init__(f"not a directory - {name} (while resolving {path})")


class QueryParseError(LsLRError):
    """Raised when a find-style query cannot be parsed.

    Attributes:
        token: The offending token, or None when the query ended early
    """

    def __init__(self, message: str, token: Optional[str] = None):
        self.token = token
        super().__init__(message)


class CommandError(LsLRError):
    """Raised by shell commands for user-level mistakes."""
    pass
