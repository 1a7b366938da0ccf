from __future__ import annotations
from typing import Iterable, Optional


class EAD3Error(Exception):
    """Base class for every error raised by ead3."""


class MalformedInputError(EAD3Error):
    """The input is not well-formed XML (or cannot be decoded to characters)."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column


class SchemaMismatchError(EAD3Error):
    """
    Well-formed input that lacks an element or attribute the schema requires.
    `missing` lists every absent path found during the walk, e.g.
    'ead/control/recordid' or 'ead/archdesc/@level'.
    """

    def __init__(self, missing: Iterable[str], message: Optional[str] = None):
        self.missing = list(missing)
        if message is None:
            message = "Missing required EAD3 content: " + ", ".join(self.missing)
        super().__init__(message)


class EncodeInvariantError(EAD3Error):
    """A tree that cannot be encoded: required field unset, wrong node type, bad fragment."""

    def __init__(self, message: str, path: Optional[str] = None):
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path


class UnknownElementWarning(UserWarning):
    """An element with no handler was skipped while decoding."""
