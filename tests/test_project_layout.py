from __future__ import annotations

from pathlib import Path


def test_required_package_paths_exist() -> None:
    root = Path(__file__).resolve().parents[1]
    required = [
        "src/folder_monitor/shell.py",
        "src/folder_monitor/config.py",
        "src/folder_monitor/analyzers/__init__.py",
        "src/folder_monitor/records/__init__.py",
        "src/folder_monitor/monitor/__init__.py",
        "src/folder_monitor/commands/__init__.py",
        "src/folder_monitor/logging/__init__.py",
    ]
    for rel in required:
        assert (root / rel).exists(), rel
