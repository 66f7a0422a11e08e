"""Directory monitor: tracked set, snapshot time and diff pass."""

from __future__ import annotations

import os
import time
from collections.abc import Callable
from pathlib import Path

from folder_monitor.analyzers import VariantRegistry, build_variant_registry
from folder_monitor.monitor.models import (
    FileChange,
    FileError,
    MonitorClosedError,
    MonitorIOError,
    MonitorStartupError,
    StatusReport,
)
from folder_monitor.records import (
    FileRecord,
    build_file_record,
    call_with_timeout,
    list_directory,
    refresh_file_record,
)

Clock = Callable[[], int]


class DirectoryMonitor:
    """Tracks the regular files of one directory between diff passes.

    The snapshot time starts at construction and only moves on ``commit``.
    A tracked file is reported as changed once per modification: when its
    live modification time differs from the recorded one and is newer than
    the snapshot time. ``mtime_slack_ns`` widens that comparison for
    filesystems whose timestamp clock lags the wall clock.
    """

    def __init__(
        self,
        directory: Path,
        registry: VariantRegistry | None = None,
        *,
        clock: Clock | None = None,
        io_timeout: float | None = None,
        refresh_metrics_on_change: bool = True,
        mtime_slack_ns: int = 0,
    ) -> None:
        self._directory = Path(directory)
        self._registry = registry or build_variant_registry()
        self._clock = clock or time.time_ns
        self._io_timeout = io_timeout
        self._refresh_metrics_on_change = refresh_metrics_on_change
        self._mtime_slack_ns = mtime_slack_ns
        self._tracked: dict[str, FileRecord] = {}
        self._closed = False
        self._last_snapshot_time_ns = self._clock()
        self._startup_errors = self._initial_scan()

    @property
    def directory(self) -> Path:
        """Return the monitored directory."""
        return self._directory

    @property
    def last_snapshot_time_ns(self) -> int:
        """Return the committed snapshot time."""
        return self._last_snapshot_time_ns

    @property
    def startup_errors(self) -> tuple[FileError, ...]:
        """Return per-file errors from the initial scan."""
        return self._startup_errors

    @property
    def closed(self) -> bool:
        return self._closed

    def tracked(self) -> dict[str, FileRecord]:
        """Return a copy of the tracked set keyed by path."""
        self._ensure_open()
        return dict(self._tracked)

    def status(self) -> StatusReport:
        """Run one diff pass against the live directory listing."""
        self._ensure_open()
        try:
            live_paths = list_directory(self._directory, timeout=self._io_timeout)
        except OSError as error:
            raise MonitorIOError(str(self._directory), _reason(error)) from error
        live = set(live_paths)

        deleted: list[FileChange] = []
        for path in sorted(self._tracked):
            if path in live:
                continue
            record = self._tracked.pop(path)
            deleted.append(FileChange(path=path, filename=record.filename))

        added: list[FileChange] = []
        changed: list[FileChange] = []
        errors: list[FileError] = []
        for path in live_paths:
            previous = self._tracked.get(path)
            if previous is None:
                try:
                    record = build_file_record(path, self._registry, timeout=self._io_timeout)
                except OSError as error:
                    errors.append(_file_error(path, error))
                    continue
                self._tracked[path] = record
                added.append(FileChange(path=path, filename=record.filename))
                continue
            try:
                mtime_ns = call_with_timeout(
                    lambda: os.stat(path).st_mtime_ns, self._io_timeout
                )
            except OSError as error:
                errors.append(_file_error(path, error))
                continue
            if mtime_ns == previous.last_update_time_ns:
                continue
            try:
                refreshed = refresh_file_record(
                    previous,
                    self._registry,
                    recompute_metrics=self._refresh_metrics_on_change,
                    timeout=self._io_timeout,
                )
            except OSError as error:
                errors.append(_file_error(path, error))
                continue
            self._tracked[path] = refreshed
            if refreshed.is_changed(self._last_snapshot_time_ns - self._mtime_slack_ns):
                changed.append(FileChange(path=path, filename=refreshed.filename))

        return StatusReport(
            deleted=tuple(deleted),
            added=tuple(added),
            changed=tuple(changed),
            errors=tuple(errors),
        )

    def commit(self) -> int:
        """Advance the snapshot time; the tracked set is unchanged."""
        self._ensure_open()
        self._last_snapshot_time_ns = self._clock()
        return self._last_snapshot_time_ns

    def info(self, filename: str) -> FileRecord | None:
        """Return the first tracked record, in path order, with this filename."""
        self._ensure_open()
        for path in sorted(self._tracked):
            record = self._tracked[path]
            if record.filename == filename:
                return record
        return None

    def close(self) -> None:
        """Release all tracked records."""
        self._tracked.clear()
        self._closed = True

    def __enter__(self) -> DirectoryMonitor:
        return self

    def __exit__(self, *_: object) -> None:
        self.close()

    def _initial_scan(self) -> tuple[FileError, ...]:
        if not self._directory.is_dir():
            raise MonitorStartupError(str(self._directory), "not an existing directory")
        try:
            live_paths = list_directory(self._directory, timeout=self._io_timeout)
        except OSError as error:
            raise MonitorStartupError(str(self._directory), _reason(error)) from error
        errors: list[FileError] = []
        for path in live_paths:
            try:
                record = build_file_record(path, self._registry, timeout=self._io_timeout)
            except OSError as error:
                errors.append(_file_error(path, error))
                continue
            self._tracked[path] = record
        return tuple(errors)

    def _ensure_open(self) -> None:
        if self._closed:
            raise MonitorClosedError("Directory monitor is closed.")


def _file_error(path: str, error: OSError) -> FileError:
    return FileError(path=path, filename=Path(path).name, reason=_reason(error))


def _reason(error: OSError) -> str:
    return error.strerror or str(error)
