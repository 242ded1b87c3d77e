"""YAML run configuration for the command-line tools."""

from __future__ import annotations

from pathlib import Path

import yaml

DEFAULT_CONFIG = {
    "face_size": None,
    "trail_file": None,
    "plot_file": None,
    "show_map": False,
    "progress": True,
}


def load_config(path: str | Path) -> dict:
    """Load YAML config. Unknown keys are rejected so typos do not pass silently."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must contain a mapping, got {type(data).__name__}")
    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    return {**DEFAULT_CONFIG, **data}
