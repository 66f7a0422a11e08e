"""Typed models for diff pass results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class FileChange:
    """One reported path, keyed by path and shown by filename."""

    path: str
    filename: str


@dataclass(slots=True, frozen=True)
class FileError:
    """Recoverable per-file I/O failure during a scan."""

    path: str
    filename: str
    reason: str


@dataclass(slots=True, frozen=True)
class StatusReport:
    """Three-way classification of one diff pass plus per-file errors."""

    deleted: tuple[FileChange, ...] = ()
    added: tuple[FileChange, ...] = ()
    changed: tuple[FileChange, ...] = ()
    errors: tuple[FileError, ...] = field(default=())

    @property
    def has_changes(self) -> bool:
        """Return True when any deletion, addition or change was detected."""
        return bool(self.deleted or self.added or self.changed)

    def lines(self) -> list[str]:
        """Render user-facing report lines."""
        output: list[str] = []
        output.extend(f"{item.filename} was deleted." for item in self.deleted)
        output.extend(f"{item.filename} is a new file." for item in self.added)
        output.extend(f"{item.filename} has changed." for item in self.changed)
        output.extend(f"Error reading {item.filename}: {item.reason}" for item in self.errors)
        return output

    def counts(self) -> dict[str, int]:
        """Return per-category counts."""
        return {
            "deleted": len(self.deleted),
            "added": len(self.added),
            "changed": len(self.changed),
            "errors": len(self.errors),
        }


class MonitorStartupError(Exception):
    """Raised when the monitored directory cannot be opened at startup."""

    def __init__(self, directory: str, reason: str) -> None:
        super().__init__(f"Cannot monitor {directory}: {reason}")
        self.directory = directory
        self.reason = reason


class MonitorIOError(Exception):
    """Raised when listing the monitored directory fails during a diff pass."""

    def __init__(self, directory: str, reason: str) -> None:
        super().__init__(f"Cannot list {directory}: {reason}")
        self.directory = directory
        self.reason = reason


class MonitorClosedError(RuntimeError):
    """Raised when a disposed monitor is used."""
