"""Typed models for tracked file records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from folder_monitor.analyzers import FileMetrics


@dataclass(slots=True, frozen=True)
class FileRecord:
    """Represents one regular file tracked by the monitor."""

    path: str
    filename: str
    extension: str
    kind: str
    type_label: str | None
    creation_time_ns: int
    last_update_time_ns: int
    metrics: FileMetrics | None = None

    def is_changed(self, reference_time_ns: int) -> bool:
        """Return True when the recorded update time is newer than the reference."""
        return self.last_update_time_ns > reference_time_ns

    def describe(self) -> tuple[tuple[str, str], ...]:
        """Return labelled fields: base fields, type label, then metrics."""
        fields: list[tuple[str, str]] = [
            ("Filename", self.filename),
            ("Extension", self.extension),
            ("Creation Time", format_timestamp_ns(self.creation_time_ns)),
            ("Last Updated", format_timestamp_ns(self.last_update_time_ns)),
        ]
        if self.type_label is not None:
            fields.append(("Type", self.type_label))
        if self.metrics is not None:
            fields.extend(self.metrics.describe())
        return tuple(fields)

    def display_info(self) -> str:
        """Render the multi-line human-readable report."""
        return "\n".join(f"{label}: {value}" for label, value in self.describe())


def format_timestamp_ns(value_ns: int) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision."""
    seconds, remainder_ns = divmod(value_ns, 1_000_000_000)
    moment = datetime.fromtimestamp(seconds, tz=UTC).replace(microsecond=remainder_ns // 1000)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
