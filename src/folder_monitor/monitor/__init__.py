"""Directory monitoring and diff passes."""

from .manager import Clock, DirectoryMonitor
from .models import (
    FileChange,
    FileError,
    MonitorClosedError,
    MonitorIOError,
    MonitorStartupError,
    StatusReport,
)

__all__ = [
    "Clock",
    "DirectoryMonitor",
    "FileChange",
    "FileError",
    "MonitorClosedError",
    "MonitorIOError",
    "MonitorStartupError",
    "StatusReport",
]
