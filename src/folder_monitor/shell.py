"""Interactive command loop entrypoint."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from folder_monitor.analyzers import build_variant_registry
from folder_monitor.commands import (
    CommandDispatchError,
    CommandRegistry,
    CommandResult,
    register_builtin_commands,
)
from folder_monitor.config import CliOverrides, MonitorConfig, load_effective_config
from folder_monitor.logging import AuditEvent, JsonlAuditLogger, sanitize_arguments, utc_timestamp
from folder_monitor.monitor import Clock, DirectoryMonitor, MonitorStartupError

PROMPT = "Enter command (commit, status, info [filename], exit): "


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for startup configuration."""
    parser = argparse.ArgumentParser(prog="folder-monitor")
    parser.add_argument("--root-path", required=False, default=None)
    parser.add_argument("--config-dir", required=False, default=".")
    parser.add_argument("--data-dir", required=False, default=None)
    parser.add_argument("--io-timeout-seconds", type=float, required=False, default=None)
    parser.add_argument(
        "--refresh-metrics-on-change", choices=("true", "false"), required=False, default=None
    )
    parser.add_argument("--no-audit-log", action="store_true")
    return parser


class MonitorShell:
    """Line-oriented command loop around one directory monitor."""

    def __init__(self, config: MonitorConfig, clock: Clock | None = None) -> None:
        self._config = config
        registry = build_variant_registry(config.variants)
        self._monitor = DirectoryMonitor(
            config.root_path,
            registry,
            clock=clock,
            io_timeout=config.io_timeout_seconds,
            refresh_metrics_on_change=config.refresh_metrics_on_change,
            mtime_slack_ns=config.mtime_slack_ns,
        )
        self._audit_logger: JsonlAuditLogger | None = None
        if config.audit_enabled:
            self._audit_logger = JsonlAuditLogger(path=config.data_dir / "audit.jsonl")
        self._registry = CommandRegistry()
        register_builtin_commands(self._registry, self._monitor)
        self._sequence = 0

    @property
    def monitor(self) -> DirectoryMonitor:
        """Return the underlying directory monitor."""
        return self._monitor

    @property
    def audit_logger(self) -> JsonlAuditLogger | None:
        return self._audit_logger

    def serve(self, in_stream: TextIO, out_stream: TextIO, prompt: str | None = None) -> None:
        """Read commands line by line until exit or end of input."""
        try:
            while True:
                if prompt is not None:
                    out_stream.write(prompt)
                    out_stream.flush()
                raw_line = in_stream.readline()
                if not raw_line:
                    break
                tokens = raw_line.split()
                if not tokens:
                    continue
                result = self.handle_command(tokens[0], tokens[1:])
                for line in result.lines:
                    out_stream.write(f"{line}\n")
                out_stream.flush()
                if result.stop:
                    break
        finally:
            self._monitor.close()

    def handle_command(self, name: str, arguments: list[str]) -> CommandResult:
        """Dispatch one command; failures become user-facing messages."""
        try:
            result = self._registry.dispatch(name, arguments)
        except CommandDispatchError as error:
            message = error.message
            if error.code == "LISTING_FAILED":
                message = f"Error: {error.message}"
            result = CommandResult(lines=(message,))
            warning = self.log_command(
                name, arguments, ok=False, error_code=error.code, metadata={}
            )
        else:
            warning = self.log_command(
                name, arguments, ok=True, error_code=None, metadata=result.metadata
            )
        if warning is not None:
            result = replace(result, lines=(*result.lines, warning))
        return result

    def log_command(
        self,
        name: str,
        arguments: list[str],
        ok: bool,
        error_code: str | None,
        metadata: dict[str, object],
    ) -> str | None:
        """Log one sanitized command event; return a warning if the write fails."""
        if self._audit_logger is None:
            return None
        self._sequence += 1
        payload = sanitize_arguments(arguments)
        payload.update(metadata)
        event = AuditEvent(
            timestamp=utc_timestamp(),
            sequence_id=f"cmd-{self._sequence:06d}",
            command=name if name in self._registry.names() else "unknown",
            ok=ok,
            error_code=error_code,
            metadata=payload,
        )
        try:
            self._audit_logger.append(event)
        except OSError as error:
            return f"Warning: audit log write failed: {error}"
        return None


def create_shell(
    config_dir: str = ".",
    cli_overrides: CliOverrides | None = None,
    clock: Clock | None = None,
) -> MonitorShell:
    """Create a configured shell; startup and audit log errors propagate."""
    config = load_effective_config(config_dir=Path(config_dir), overrides=cli_overrides)
    return MonitorShell(config=config, clock=clock)


def main(argv: list[str] | None = None) -> int:
    """Entrypoint for the folder monitor process."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    refresh: bool | None = None
    if args.refresh_metrics_on_change == "true":
        refresh = True
    if args.refresh_metrics_on_change == "false":
        refresh = False
    overrides = CliOverrides(
        root_path=Path(args.root_path) if args.root_path is not None else None,
        data_dir=Path(args.data_dir) if args.data_dir is not None else None,
        io_timeout_seconds=args.io_timeout_seconds,
        refresh_metrics_on_change=refresh,
        audit_enabled=False if args.no_audit_log else None,
    )
    try:
        shell = create_shell(config_dir=args.config_dir, cli_overrides=overrides)
    except (MonitorStartupError, OSError, ValueError) as error:
        sys.stderr.write(f"folder-monitor: {error}\n")
        return 2
    prompt = PROMPT if sys.stdin.isatty() else None
    shell.serve(in_stream=sys.stdin, out_stream=sys.stdout, prompt=prompt)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
