"""Variant registry with deterministic selection behavior."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import PurePath

from folder_monitor.analyzers.base import ContentAnalyzer

KIND_GENERIC = "generic"
KIND_TEXT = "text"
KIND_IMAGE = "image"
KIND_PROGRAM = "program"


@dataclass(slots=True, frozen=True)
class VariantRule:
    """Maps a set of extensions to a file variant and its analyzer."""

    kind: str
    label: str | None
    extensions: tuple[str, ...] = ()
    analyzer: ContentAnalyzer | None = None

    def supports_extension(self, extension: str) -> bool:
        """Return True when the extension matches exactly (case-sensitive)."""
        return extension in self.extensions


GENERIC_RULE = VariantRule(kind=KIND_GENERIC, label=None)


@dataclass(slots=True)
class VariantRegistry:
    """Ordered variant rules with explicit fallback rule."""

    _rules: list[VariantRule] = field(default_factory=list)
    _fallback: VariantRule = GENERIC_RULE

    def register(self, rule: VariantRule, *, fallback: bool = False) -> None:
        """Register a rule in deterministic insertion order."""
        if fallback:
            self._fallback = rule
            return
        self._rules.append(rule)

    def select(self, path: str) -> VariantRule:
        """Select the first rule matching the path suffix, else fallback."""
        extension = PurePath(path).suffix
        for rule in self._rules:
            if rule.supports_extension(extension):
                return rule
        return self._fallback
