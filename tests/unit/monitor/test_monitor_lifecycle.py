from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

import pytest

from folder_monitor.analyzers import (
    GENERIC_RULE,
    TextMetrics,
    VariantRegistry,
    VariantRule,
)
from folder_monitor.monitor import (
    DirectoryMonitor,
    MonitorClosedError,
    MonitorIOError,
    MonitorStartupError,
)

BASE_NS = 2_000_000_000_000_000_000


class FailingAnalyzer:
    name = "failing"

    def __init__(self) -> None:
        self.enabled = True

    def analyze(self, lines: Iterable[bytes]) -> TextMetrics:
        if self.enabled:
            raise PermissionError(13, "Permission denied")
        return TextMetrics(line_count=sum(1 for _ in lines), word_count=0, char_count=0)


def _registry(analyzer: FailingAnalyzer) -> VariantRegistry:
    registry = VariantRegistry()
    registry.register(
        VariantRule(kind="text", label="Text File", extensions=(".bad",), analyzer=analyzer)
    )
    registry.register(GENERIC_RULE, fallback=True)
    return registry


def _write(path: Path, content: str, mtime_ns: int) -> None:
    path.write_text(content, encoding="utf-8")
    os.utime(path, ns=(mtime_ns, mtime_ns))


def test_missing_directory_is_a_startup_failure(tmp_path: Path) -> None:
    with pytest.raises(MonitorStartupError, match="missing"):
        DirectoryMonitor(tmp_path / "missing")


def test_file_path_is_a_startup_failure(tmp_path: Path) -> None:
    target = tmp_path / "plain.txt"
    target.write_text("x", encoding="utf-8")

    with pytest.raises(MonitorStartupError):
        DirectoryMonitor(target)


def test_unreadable_file_at_startup_is_skipped_then_added(tmp_path: Path) -> None:
    _write(tmp_path / "locked.bad", "x", BASE_NS - 1)
    _write(tmp_path / "fine.bin", "y", BASE_NS - 1)
    analyzer = FailingAnalyzer()

    monitor = DirectoryMonitor(tmp_path, _registry(analyzer), clock=lambda: BASE_NS)

    assert [error.filename for error in monitor.startup_errors] == ["locked.bad"]
    assert monitor.info("locked.bad") is None
    assert monitor.info("fine.bin") is not None

    analyzer.enabled = False
    assert monitor.status().lines() == ["locked.bad is a new file."]


def test_read_failure_during_diff_is_reported_per_file(tmp_path: Path) -> None:
    analyzer = FailingAnalyzer()
    monitor = DirectoryMonitor(tmp_path, _registry(analyzer), clock=lambda: BASE_NS)

    _write(tmp_path / "locked.bad", "x", BASE_NS + 1)
    _write(tmp_path / "open.bin", "y", BASE_NS + 1)
    report = monitor.status()

    assert report.lines() == [
        "open.bin is a new file.",
        "Error reading locked.bad: Permission denied",
    ]
    assert str(tmp_path / "locked.bad") not in monitor.tracked()


def test_refresh_failure_keeps_previous_record(tmp_path: Path) -> None:
    analyzer = FailingAnalyzer()
    analyzer.enabled = False
    _write(tmp_path / "data.bad", "x", BASE_NS - 1)
    monitor = DirectoryMonitor(tmp_path, _registry(analyzer), clock=lambda: BASE_NS)
    before = monitor.info("data.bad")

    analyzer.enabled = True
    _write(tmp_path / "data.bad", "x\ny", BASE_NS + 1)
    report = monitor.status()

    assert report.changed == ()
    assert [error.filename for error in report.errors] == ["data.bad"]
    assert monitor.info("data.bad") == before


def test_listing_failure_leaves_tracked_set_untouched(tmp_path: Path) -> None:
    watched = tmp_path / "watched"
    watched.mkdir()
    _write(watched / "a.txt", "a", BASE_NS - 1)
    monitor = DirectoryMonitor(watched, clock=lambda: BASE_NS)
    before = monitor.tracked()

    (watched / "a.txt").unlink()
    watched.rmdir()

    with pytest.raises(MonitorIOError):
        monitor.status()
    assert monitor.tracked() == before


def test_info_on_unknown_name_returns_none(tmp_path: Path) -> None:
    monitor = DirectoryMonitor(tmp_path, clock=lambda: BASE_NS)

    assert monitor.info("never-seen.txt") is None


def test_closed_monitor_releases_records_and_rejects_use(tmp_path: Path) -> None:
    _write(tmp_path / "a.txt", "a", BASE_NS - 1)

    with DirectoryMonitor(tmp_path, clock=lambda: BASE_NS) as monitor:
        assert monitor.info("a.txt") is not None

    assert monitor.closed is True
    with pytest.raises(MonitorClosedError):
        monitor.status()
    with pytest.raises(MonitorClosedError):
        monitor.info("a.txt")
