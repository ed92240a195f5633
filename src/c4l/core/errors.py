# src/c4l/core/errors.py
from __future__ import annotations


class C4LError(Exception):
    """Base class for every error raised by c4l."""


class MissingInputError(C4LError, ValueError):
    """No draws were supplied (or nothing is left to export)."""


class InvalidDateError(C4LError, ValueError):
    """A date that must be valid could not be parsed."""


class HistoryIOError(C4LError, OSError):
    """Reading, writing or copying a history/export file failed.

    Always raised ``from`` the underlying OSError so the cause travels with it.
    """

    def __init__(self, path, cause: BaseException | None = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"I/O failure on {path}{detail}")
