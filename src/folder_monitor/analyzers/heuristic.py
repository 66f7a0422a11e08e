"""Substring-based code analyzer for source files."""

from __future__ import annotations

from collections.abc import Iterable

from folder_monitor.analyzers.base import ProgramMetrics

CLASS_MARKER = b"class "
METHOD_MARKERS = (b"void ", b"(")


class HeuristicCodeAnalyzer:
    """Counts declarations with literal substring matches, not a parser.

    A line counts as a class declaration when it contains ``"class "`` and as
    a method when it contains ``"void "`` or any ``"("``. Control-flow
    parentheses and calls are therefore counted as methods too.
    """

    name = "heuristic_code"

    def analyze(self, lines: Iterable[bytes]) -> ProgramMetrics:
        """Scan each line once and count marker hits."""
        line_count = 0
        class_count = 0
        method_count = 0
        for line in lines:
            line_count += 1
            if CLASS_MARKER in line:
                class_count += 1
            if any(marker in line for marker in METHOD_MARKERS):
                method_count += 1
        return ProgramMetrics(
            line_count=line_count,
            class_count=class_count,
            method_count=method_count,
        )
