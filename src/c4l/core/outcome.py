# src/c4l/core/outcome.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class Status(str, Enum):
    OK = "ok"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass(frozen=True)
class Outcome:
    """
    Result of one user-facing action.

    CANCELLED means the user dismissed a prompt; it is neither a success nor
    an error. FAILED always carries the exception that caused it.
    """
    status: Status
    path: Optional[Path] = None
    error: Optional[BaseException] = None

    @classmethod
    def ok(cls, path: Path | str | None = None) -> "Outcome":
        return cls(Status.OK, path=Path(path) if path is not None else None)

    @classmethod
    def cancelled(cls) -> "Outcome":
        return cls(Status.CANCELLED)

    @classmethod
    def failed(cls, error: BaseException) -> "Outcome":
        return cls(Status.FAILED, error=error)

    @property
    def is_ok(self) -> bool:
        return self.status is Status.OK

    @property
    def is_cancelled(self) -> bool:
        return self.status is Status.CANCELLED

    @property
    def is_failed(self) -> bool:
        return self.status is Status.FAILED
