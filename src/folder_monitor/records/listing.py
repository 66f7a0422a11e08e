"""Non-recursive directory listing with optional I/O timeouts."""

from __future__ import annotations

import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")


class FilesystemTimeoutError(TimeoutError):
    """Raised when a filesystem call does not finish within the configured timeout."""


IO_THREAD_NAME = "folder-monitor-io"


def call_with_timeout(func: Callable[[], T], timeout: float | None) -> T:
    """Run blocking filesystem work, bounded by timeout seconds when set.

    The work runs on a daemon thread. A call that never returns is abandoned
    and does not hold the interpreter open at exit.
    """
    if timeout is None:
        return func()
    outcome: dict[str, object] = {}

    def run() -> None:
        try:
            outcome["value"] = func()
        except BaseException as error:  # re-raised on the calling thread
            outcome["error"] = error

    worker = threading.Thread(target=run, name=IO_THREAD_NAME, daemon=True)
    worker.start()
    worker.join(timeout)
    if worker.is_alive():
        raise FilesystemTimeoutError(f"Filesystem call did not finish within {timeout:g}s.")
    if "error" in outcome:
        raise outcome["error"]  # type: ignore[misc]
    return outcome["value"]  # type: ignore[return-value]


def list_directory(directory: Path, timeout: float | None = None) -> list[str]:
    """Return paths of the immediate regular-file children, sorted by name.

    Subdirectories and other non-regular entries are excluded. Symlinks are
    followed, so a link to a regular file is listed.
    """
    return call_with_timeout(lambda: _scan_regular_files(directory), timeout)


def _scan_regular_files(directory: Path) -> list[str]:
    paths: list[tuple[str, str]] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                if not entry.is_file():
                    continue
            except OSError:
                continue
            paths.append((entry.name, entry.path))
    paths.sort()
    return [path for _, path in paths]
