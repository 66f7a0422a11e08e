"""File record model, construction and directory listing."""

from .builder import NotRegularFileError, build_file_record, refresh_file_record
from .listing import FilesystemTimeoutError, call_with_timeout, list_directory
from .models import FileRecord, format_timestamp_ns

__all__ = [
    "FileRecord",
    "FilesystemTimeoutError",
    "NotRegularFileError",
    "build_file_record",
    "call_with_timeout",
    "format_timestamp_ns",
    "list_directory",
    "refresh_file_record",
]
