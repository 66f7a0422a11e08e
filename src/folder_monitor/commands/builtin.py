"""Built-in monitor commands."""

from __future__ import annotations

from folder_monitor.commands.registry import (
    CommandDispatchError,
    CommandHandler,
    CommandRegistry,
    CommandResult,
)
from folder_monitor.monitor import DirectoryMonitor, MonitorIOError


def register_builtin_commands(registry: CommandRegistry, monitor: DirectoryMonitor) -> None:
    """Register commit, status, info and exit."""
    registry.register("commit", _commit_handler(monitor))
    registry.register("status", _status_handler(monitor))
    registry.register("info", _info_handler(monitor))
    registry.register("exit", _exit_handler())


def _commit_handler(monitor: DirectoryMonitor) -> CommandHandler:
    def handler(_: list[str]) -> CommandResult:
        snapshot_time_ns = monitor.commit()
        return CommandResult(
            lines=("Snapshot updated.",),
            metadata={"snapshot_time_ns": snapshot_time_ns},
        )

    return handler


def _status_handler(monitor: DirectoryMonitor) -> CommandHandler:
    def handler(_: list[str]) -> CommandResult:
        try:
            report = monitor.status()
        except MonitorIOError as error:
            raise CommandDispatchError(code="LISTING_FAILED", message=str(error)) from error
        metadata: dict[str, object] = dict(report.counts())
        if report.errors:
            metadata["error_files"] = [item.filename for item in report.errors]
        return CommandResult(lines=tuple(report.lines()), metadata=metadata)

    return handler


def _info_handler(monitor: DirectoryMonitor) -> CommandHandler:
    def handler(arguments: list[str]) -> CommandResult:
        if not arguments:
            raise CommandDispatchError(code="MISSING_ARGUMENT", message="Usage: info <filename>")
        filename = arguments[0]
        record = monitor.info(filename)
        if record is None:
            return CommandResult(lines=(f"File not found: {filename}",), metadata={"found": False})
        return CommandResult(
            lines=tuple(record.display_info().splitlines()),
            metadata={"found": True, "kind": record.kind},
        )

    return handler


def _exit_handler() -> CommandHandler:
    def handler(_: list[str]) -> CommandResult:
        return CommandResult(stop=True)

    return handler
