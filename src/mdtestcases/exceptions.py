"""Custom exceptions for mdtestcases."""

from __future__ import annotations


class MdTestCasesError(Exception):
    """Base exception for mdtestcases operations."""


class CollectionError(MdTestCasesError):
    """Fixture document is malformed at a given line."""

    def __init__(self, message: str, *, line: int) -> None:
        super().__init__(message)
        self.line = line


class MergeError(CollectionError):
    """Options block rejected by the merge capability."""

    def __init__(self, *, line: int, source: str, reason: str) -> None:
        super().__init__(
            f"Failed to parse options from code block at line {line}: {reason}",
            line=line,
        )
        self.source = source
        self.reason = reason


class OrphanArgumentError(CollectionError):
    """Positional code block appears before any heading."""

    def __init__(self, *, line: int) -> None:
        super().__init__(
            f"Code block at line {line} appears before any heading; "
            "test arguments must belong to a heading",
            line=line,
        )


class LoadError(MdTestCasesError):
    """Error while loading a fixture document."""


class DocumentNotFoundError(LoadError):
    """Fixture document does not exist at the given path or URL."""
