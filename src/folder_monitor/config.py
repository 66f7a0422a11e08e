"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "folder_monitor.toml"
DEFAULT_ROOT_PATH = "./test_folder"
MAX_IO_TIMEOUT_SECONDS = 3600.0
MAX_MTIME_SLACK_MS = 1000

DEFAULT_TEXT_EXTENSIONS = (".txt",)
DEFAULT_IMAGE_EXTENSIONS = (".png", ".jpg")
DEFAULT_PROGRAM_EXTENSIONS = (".cpp", ".java")


@dataclass(slots=True, frozen=True)
class VariantsConfig:
    """Extension lists used to classify files into variants."""

    text_extensions: tuple[str, ...]
    image_extensions: tuple[str, ...]
    program_extensions: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class MonitorConfig:
    """Fully merged monitor configuration."""

    root_path: Path
    data_dir: Path
    io_timeout_seconds: float | None
    refresh_metrics_on_change: bool
    audit_enabled: bool
    variants: VariantsConfig
    mtime_slack_ns: int = 0


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional startup overrides applied at highest precedence."""

    root_path: Path | None = None
    data_dir: Path | None = None
    io_timeout_seconds: float | None = None
    refresh_metrics_on_change: bool | None = None
    audit_enabled: bool | None = None


def default_config(config_dir: Path) -> MonitorConfig:
    """Build default config anchored at a config directory."""
    resolved_dir = config_dir.resolve()
    return MonitorConfig(
        root_path=resolved_dir / DEFAULT_ROOT_PATH,
        data_dir=resolved_dir / ".folder_monitor",
        io_timeout_seconds=None,
        refresh_metrics_on_change=True,
        audit_enabled=True,
        variants=VariantsConfig(
            text_extensions=DEFAULT_TEXT_EXTENSIONS,
            image_extensions=DEFAULT_IMAGE_EXTENSIONS,
            program_extensions=DEFAULT_PROGRAM_EXTENSIONS,
        ),
    )


def load_config_file(config_dir: Path) -> dict[str, object]:
    """Load optional folder_monitor.toml from the config directory."""
    config_path = config_dir / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _tuple_of_extensions(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"Config field '{section}.{field}' must contain only strings.")
        if not item.startswith("."):
            raise ValueError(f"Config field '{section}.{field}' entries must start with '.'.")
        output.append(item)
    return tuple(output)


def _optional_bool(value: object, name: str, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ValueError(f"Config field '{name}' must be a boolean.")
    return value


def _optional_timeout(value: object, name: str, default: float | None) -> float | None:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ValueError(f"Config field '{name}' must be a positive number.")
    if value > MAX_IO_TIMEOUT_SECONDS:
        raise ValueError(f"Config field '{name}' must be <= {MAX_IO_TIMEOUT_SECONDS:g}.")
    return float(value)


def _mtime_slack_ns(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"Config field '{name}' must be a non-negative integer.")
    if value > MAX_MTIME_SLACK_MS:
        raise ValueError(f"Config field '{name}' must be <= {MAX_MTIME_SLACK_MS}.")
    return value * 1_000_000


def merge_config(
    base: MonitorConfig,
    payload: dict[str, object],
    overrides: CliOverrides,
    config_dir: Path,
) -> MonitorConfig:
    """Merge defaults, config file, then CLI/startup overrides."""
    monitor_payload = _get_table(payload, "monitor")
    variants_payload = _get_table(payload, "variants")
    audit_payload = _get_table(payload, "audit")

    root_path = base.root_path
    if "root_path" in monitor_payload:
        raw_root = monitor_payload["root_path"]
        if not isinstance(raw_root, str) or not raw_root.strip():
            raise ValueError("Config field 'monitor.root_path' must be a non-empty string.")
        root_path = config_dir.resolve() / raw_root

    io_timeout_seconds = _optional_timeout(
        monitor_payload.get("io_timeout_seconds"),
        "monitor.io_timeout_seconds",
        base.io_timeout_seconds,
    )
    refresh_metrics_on_change = _optional_bool(
        monitor_payload.get("refresh_metrics_on_change"),
        "monitor.refresh_metrics_on_change",
        base.refresh_metrics_on_change,
    )
    mtime_slack_ns = base.mtime_slack_ns
    if "mtime_slack_ms" in monitor_payload:
        mtime_slack_ns = _mtime_slack_ns(
            monitor_payload["mtime_slack_ms"], "monitor.mtime_slack_ms"
        )
    audit_enabled = _optional_bool(audit_payload.get("enabled"), "audit.enabled", base.audit_enabled)

    variants = base.variants
    text_extensions = variants.text_extensions
    if "text_extensions" in variants_payload:
        text_extensions = _tuple_of_extensions(
            variants_payload["text_extensions"], "variants", "text_extensions"
        )
    image_extensions = variants.image_extensions
    if "image_extensions" in variants_payload:
        image_extensions = _tuple_of_extensions(
            variants_payload["image_extensions"], "variants", "image_extensions"
        )
    program_extensions = variants.program_extensions
    if "program_extensions" in variants_payload:
        program_extensions = _tuple_of_extensions(
            variants_payload["program_extensions"], "variants", "program_extensions"
        )

    merged = MonitorConfig(
        root_path=root_path,
        data_dir=base.data_dir,
        io_timeout_seconds=io_timeout_seconds,
        refresh_metrics_on_change=refresh_metrics_on_change,
        audit_enabled=audit_enabled,
        variants=VariantsConfig(
            text_extensions=text_extensions,
            image_extensions=image_extensions,
            program_extensions=program_extensions,
        ),
        mtime_slack_ns=mtime_slack_ns,
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: MonitorConfig, overrides: CliOverrides) -> MonitorConfig:
    """Apply startup overrides at highest precedence."""
    io_timeout_seconds = _optional_timeout(
        overrides.io_timeout_seconds,
        "overrides.io_timeout_seconds",
        config.io_timeout_seconds,
    )
    refresh_metrics_on_change = (
        overrides.refresh_metrics_on_change
        if overrides.refresh_metrics_on_change is not None
        else config.refresh_metrics_on_change
    )
    audit_enabled = (
        overrides.audit_enabled if overrides.audit_enabled is not None else config.audit_enabled
    )
    root_path = (overrides.root_path or config.root_path).resolve()
    data_dir = (overrides.data_dir or config.data_dir).resolve()
    if audit_enabled and data_dir.is_relative_to(root_path):
        raise ValueError(
            f"Config field 'data_dir' ({data_dir}) must be outside the monitored "
            f"directory {root_path}; choose another data dir or disable the audit log."
        )
    return MonitorConfig(
        root_path=root_path,
        data_dir=data_dir,
        io_timeout_seconds=io_timeout_seconds,
        refresh_metrics_on_change=refresh_metrics_on_change,
        audit_enabled=audit_enabled,
        variants=config.variants,
        mtime_slack_ns=config.mtime_slack_ns,
    )


def load_effective_config(config_dir: Path, overrides: CliOverrides | None = None) -> MonitorConfig:
    """Load effective config using merge order defaults -> config file -> overrides."""
    resolved_dir = config_dir.resolve()
    base = default_config(resolved_dir)
    payload = load_config_file(resolved_dir)
    return merge_config(base, payload, overrides or CliOverrides(), resolved_dir)
