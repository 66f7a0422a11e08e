"""File variant classification and content analyzers."""

from .base import ContentAnalyzer, FileMetrics, ProgramMetrics, TextMetrics
from .heuristic import HeuristicCodeAnalyzer
from .registry import (
    GENERIC_RULE,
    KIND_GENERIC,
    KIND_IMAGE,
    KIND_PROGRAM,
    KIND_TEXT,
    VariantRegistry,
    VariantRule,
)
from .runtime import build_variant_registry
from .text import TextStatsAnalyzer

__all__ = [
    "ContentAnalyzer",
    "FileMetrics",
    "GENERIC_RULE",
    "HeuristicCodeAnalyzer",
    "KIND_GENERIC",
    "KIND_IMAGE",
    "KIND_PROGRAM",
    "KIND_TEXT",
    "ProgramMetrics",
    "TextMetrics",
    "TextStatsAnalyzer",
    "VariantRegistry",
    "VariantRule",
    "build_variant_registry",
]
