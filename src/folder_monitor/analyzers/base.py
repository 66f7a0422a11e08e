"""Core analyzer protocol and metric types."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True, frozen=True)
class TextMetrics:
    """Line, word and character counts of a text file."""

    line_count: int
    word_count: int
    char_count: int

    def describe(self) -> tuple[tuple[str, str], ...]:
        """Return labelled metric fields in display order."""
        return (
            ("Lines", str(self.line_count)),
            ("Words", str(self.word_count)),
            ("Characters", str(self.char_count)),
        )


@dataclass(slots=True, frozen=True)
class ProgramMetrics:
    """Line, class and method counts of a source file."""

    line_count: int
    class_count: int
    method_count: int

    def describe(self) -> tuple[tuple[str, str], ...]:
        """Return labelled metric fields in display order."""
        return (
            ("Lines", str(self.line_count)),
            ("Classes", str(self.class_count)),
            ("Methods", str(self.method_count)),
        )


FileMetrics = TextMetrics | ProgramMetrics


class ContentAnalyzer(Protocol):
    """Protocol implemented by content analyzers."""

    name: str

    def analyze(self, lines: Iterable[bytes]) -> FileMetrics:
        """Compute metrics from raw lines with their newline removed."""
