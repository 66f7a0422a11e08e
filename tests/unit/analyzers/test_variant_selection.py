from __future__ import annotations

from folder_monitor.analyzers import (
    GENERIC_RULE,
    KIND_GENERIC,
    KIND_IMAGE,
    KIND_PROGRAM,
    KIND_TEXT,
    VariantRegistry,
    VariantRule,
    build_variant_registry,
)
from folder_monitor.config import VariantsConfig


def test_default_table_selects_expected_variants() -> None:
    registry = build_variant_registry()

    assert registry.select("dir/notes.txt").kind == KIND_TEXT
    assert registry.select("dir/photo.png").kind == KIND_IMAGE
    assert registry.select("dir/photo.jpg").kind == KIND_IMAGE
    assert registry.select("dir/main.cpp").kind == KIND_PROGRAM
    assert registry.select("dir/Main.java").kind == KIND_PROGRAM
    assert registry.select("dir/legacy.bmp").kind == KIND_GENERIC
    assert registry.select("dir/Makefile").kind == KIND_GENERIC


def test_selection_is_case_sensitive() -> None:
    registry = build_variant_registry()

    assert registry.select("README.TXT").kind == KIND_GENERIC
    assert registry.select("IMAGE.PNG").kind == KIND_GENERIC


def test_only_last_suffix_is_considered() -> None:
    registry = build_variant_registry()

    assert registry.select("backup.txt.gz").kind == KIND_GENERIC
    assert registry.select("notes.old.txt").kind == KIND_TEXT


def test_first_registered_rule_wins() -> None:
    registry = VariantRegistry()
    registry.register(VariantRule(kind="first", label="First", extensions=(".x",)))
    registry.register(VariantRule(kind="second", label="Second", extensions=(".x",)))
    registry.register(GENERIC_RULE, fallback=True)

    assert registry.select("file.x").kind == "first"
    assert registry.select("file.y").kind == KIND_GENERIC


def test_configured_extensions_replace_defaults() -> None:
    registry = build_variant_registry(
        VariantsConfig(
            text_extensions=(".md",),
            image_extensions=(".gif",),
            program_extensions=(".py",),
        )
    )

    assert registry.select("README.md").kind == KIND_TEXT
    assert registry.select("notes.txt").kind == KIND_GENERIC
    assert registry.select("anim.gif").kind == KIND_IMAGE
    assert registry.select("tool.py").kind == KIND_PROGRAM
