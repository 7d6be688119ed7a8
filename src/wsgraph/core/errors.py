"""
Error taxonomy for the workspace graph engine.

Parsing failures are permanent for a given lockfile and must be fixed
upstream (usually by regenerating the lockfile). Cycle detection never
raises; only the topological sorter treats a cycle as an error.
"""

from __future__ import annotations

from typing import List, Sequence


class WsgraphError(Exception):
    """Base class for all engine errors."""


class LockfileParseError(WsgraphError):
    """
    Raised when lockfile content is not valid structured data of the
    expected shape.

    Attributes:
        source: Where the content came from (file path or ``"<string>"``).
        reason: The underlying structural complaint.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse {source}: {reason}")


class LockfileNotFoundError(LockfileParseError):
    """Raised when the lockfile does not exist at the expected location."""

    def __init__(self, source: str):
        super().__init__(
            source,
            "file not found. Run 'pnpm install' first or ensure you're in the workspace root.",
        )


class UnsupportedSchemaError(WsgraphError):
    """
    Raised when the lockfile declares a schema major version other than
    the supported one.

    Attributes:
        version: The declared ``lockfileVersion``.
        supported: The supported major version.
    """

    def __init__(self, version: str, supported: int):
        self.version = version
        self.supported = supported
        super().__init__(
            f"Unsupported lockfile version: {version}. Only v{supported}.x is supported."
        )


class CyclicDependencyError(WsgraphError):
    """
    Raised by the topological sorter when a target's closure is cyclic.

    Attributes:
        path: Node ids forming the cycle; the last id repeats the first.
    """

    def __init__(self, path: Sequence[str]):
        self.path: List[str] = list(path)
        super().__init__(f"Circular dependency detected: {' -> '.join(self.path)}")


class PackageNotFoundError(WsgraphError):
    """Raised when a package query matches nothing."""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"Package '{query}' not found in workspace")


class AmbiguousPackageError(WsgraphError):
    """
    Raised when a package query matches more than one package.

    Attributes:
        query: The user's query.
        matches: Sorted ids of every matching package.
    """

    def __init__(self, query: str, matches: Sequence[str]):
        self.query = query
        self.matches: List[str] = sorted(matches)
        super().__init__(
            f"Ambiguous package query '{query}'. Matches: {', '.join(self.matches)}"
        )
