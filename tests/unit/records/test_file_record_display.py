from __future__ import annotations

from folder_monitor.analyzers import ProgramMetrics, TextMetrics
from folder_monitor.records import FileRecord, format_timestamp_ns

STAMP_NS = 1_700_000_000_123_000_000


def _record(**overrides: object) -> FileRecord:
    values: dict[str, object] = {
        "path": "watched/notes.txt",
        "filename": "notes.txt",
        "extension": ".txt",
        "kind": "text",
        "type_label": "Text File",
        "creation_time_ns": STAMP_NS,
        "last_update_time_ns": STAMP_NS,
        "metrics": TextMetrics(line_count=3, word_count=4, char_count=4),
    }
    values.update(overrides)
    return FileRecord(**values)


def test_timestamp_format_is_utc_milliseconds() -> None:
    assert format_timestamp_ns(STAMP_NS) == "2023-11-14T22:13:20.123Z"


def test_text_display_order_is_fixed() -> None:
    assert _record().display_info().splitlines() == [
        "Filename: notes.txt",
        "Extension: .txt",
        "Creation Time: 2023-11-14T22:13:20.123Z",
        "Last Updated: 2023-11-14T22:13:20.123Z",
        "Type: Text File",
        "Lines: 3",
        "Words: 4",
        "Characters: 4",
    ]


def test_program_display_lists_class_and_method_counts() -> None:
    record = _record(
        filename="Main.java",
        extension=".java",
        kind="program",
        type_label="Program File",
        metrics=ProgramMetrics(line_count=10, class_count=1, method_count=3),
    )

    assert record.display_info().splitlines()[4:] == [
        "Type: Program File",
        "Lines: 10",
        "Classes: 1",
        "Methods: 3",
    ]


def test_generic_display_has_only_base_fields() -> None:
    record = _record(
        filename="legacy.bmp", extension=".bmp", kind="generic", type_label=None, metrics=None
    )

    labels = [label for label, _ in record.describe()]

    assert labels == ["Filename", "Extension", "Creation Time", "Last Updated"]


def test_image_display_ends_with_type_label() -> None:
    record = _record(
        filename="photo.png", extension=".png", kind="image", type_label="Image File", metrics=None
    )

    assert record.display_info().splitlines()[-1] == "Type: Image File"


def test_is_changed_is_strictly_newer() -> None:
    record = _record()

    assert record.is_changed(STAMP_NS - 1) is True
    assert record.is_changed(STAMP_NS) is False
    assert record.is_changed(STAMP_NS + 1) is False
