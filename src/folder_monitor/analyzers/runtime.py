"""Runtime variant registry construction."""

from __future__ import annotations

from folder_monitor.analyzers.heuristic import HeuristicCodeAnalyzer
from folder_monitor.analyzers.registry import (
    GENERIC_RULE,
    KIND_IMAGE,
    KIND_PROGRAM,
    KIND_TEXT,
    VariantRegistry,
    VariantRule,
)
from folder_monitor.analyzers.text import TextStatsAnalyzer
from folder_monitor.config import (
    DEFAULT_IMAGE_EXTENSIONS,
    DEFAULT_PROGRAM_EXTENSIONS,
    DEFAULT_TEXT_EXTENSIONS,
    VariantsConfig,
)


def build_variant_registry(config: VariantsConfig | None = None) -> VariantRegistry:
    """Build variant registry from effective config."""
    variants = config or VariantsConfig(
        text_extensions=DEFAULT_TEXT_EXTENSIONS,
        image_extensions=DEFAULT_IMAGE_EXTENSIONS,
        program_extensions=DEFAULT_PROGRAM_EXTENSIONS,
    )
    registry = VariantRegistry()
    registry.register(
        VariantRule(
            kind=KIND_TEXT,
            label="Text File",
            extensions=variants.text_extensions,
            analyzer=TextStatsAnalyzer(),
        )
    )
    # Image files only get generic metadata; no decoding.
    registry.register(
        VariantRule(kind=KIND_IMAGE, label="Image File", extensions=variants.image_extensions)
    )
    registry.register(
        VariantRule(
            kind=KIND_PROGRAM,
            label="Program File",
            extensions=variants.program_extensions,
            analyzer=HeuristicCodeAnalyzer(),
        )
    )
    registry.register(GENERIC_RULE, fallback=True)
    return registry
