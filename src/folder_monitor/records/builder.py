"""File record construction from filesystem metadata and content."""

from __future__ import annotations

import errno
import os
import stat
from collections.abc import Iterator
from dataclasses import replace
from pathlib import Path

from folder_monitor.analyzers import VariantRegistry, VariantRule
from folder_monitor.records.listing import call_with_timeout
from folder_monitor.records.models import FileRecord


class NotRegularFileError(OSError):
    """Raised when a path exists but is not a regular file."""

    def __init__(self, path: str) -> None:
        super().__init__(errno.EINVAL, "Not a regular file", path)


def build_file_record(
    path: str,
    registry: VariantRegistry,
    timeout: float | None = None,
) -> FileRecord:
    """Build a record for one path; OSError propagates, nothing partial is returned."""
    rule = registry.select(path)
    return call_with_timeout(lambda: _build(path, rule), timeout)


def refresh_file_record(
    record: FileRecord,
    registry: VariantRegistry,
    *,
    recompute_metrics: bool,
    timeout: float | None = None,
) -> FileRecord:
    """Return the record updated from live filesystem state.

    The variant and the creation time of the first discovery are kept.
    """
    if not recompute_metrics:
        mtime_ns = call_with_timeout(lambda: _regular_file_mtime_ns(record.path), timeout)
        return replace(record, last_update_time_ns=mtime_ns)
    rebuilt = build_file_record(record.path, registry, timeout=timeout)
    return replace(rebuilt, creation_time_ns=record.creation_time_ns)


def _build(path: str, rule: VariantRule) -> FileRecord:
    name = Path(path).name
    # Creation and update time come from the same modification-time read.
    mtime_ns = _regular_file_mtime_ns(path)
    metrics = None
    if rule.analyzer is not None:
        with open(path, "rb") as handle:
            metrics = rule.analyzer.analyze(_strip_newlines(handle))
    return FileRecord(
        path=path,
        filename=name,
        extension=Path(name).suffix,
        kind=rule.kind,
        type_label=rule.label,
        creation_time_ns=mtime_ns,
        last_update_time_ns=mtime_ns,
        metrics=metrics,
    )


def _regular_file_mtime_ns(path: str) -> int:
    info = os.stat(path)
    if not stat.S_ISREG(info.st_mode):
        raise NotRegularFileError(path)
    return info.st_mtime_ns


def _strip_newlines(lines: Iterator[bytes]) -> Iterator[bytes]:
    for line in lines:
        if line.endswith(b"\n"):
            yield line[:-1]
        else:
            yield line
