"""Plain text statistics."""

from __future__ import annotations

from collections.abc import Iterable

from folder_monitor.analyzers.base import TextMetrics


class TextStatsAnalyzer:
    """Counts lines, space-delimited words and characters."""

    name = "text_stats"

    def analyze(self, lines: Iterable[bytes]) -> TextMetrics:
        """Counts are in bytes; words per line are spaces + 1, so empty lines count one."""
        line_count = 0
        word_count = 0
        char_count = 0
        for line in lines:
            line_count += 1
            word_count += line.count(b" ") + 1
            char_count += len(line)
        return TextMetrics(line_count=line_count, word_count=word_count, char_count=char_count)
