"""
Game settings loaded from YAML.

Any key missing from the file falls back to ``DEFAULT_CONFIG``. Unknown keys
are rejected so a typo does not silently leave a default in place.
"""

from __future__ import annotations

import pathlib
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "rows": 20,
    "cols": 12,
    "block_size": 20,
    "line_clear_points": 100,
    "fall_speed_ms": 200,
    "fast_fall_speed_ms": 50,
    "spawn_x": 3,
    "spawn_y": 0,
    "fps": 60,
}

_POSITIVE_KEYS = (
    "rows",
    "cols",
    "block_size",
    "line_clear_points",
    "fall_speed_ms",
    "fast_fall_speed_ms",
    "fps",
)

# Side length of the largest shape template
_MAX_SHAPE_SIZE = 4


def merge_config(overrides: dict[str, Any] | None) -> dict[str, Any]:
    """Return ``DEFAULT_CONFIG`` updated with ``overrides``.

    Raises:
        ValueError: If a key is unknown, a size/interval is not positive, or
            the spawn offset would put the largest shape outside the grid.
    """
    config = dict(DEFAULT_CONFIG)
    if not overrides:
        return config

    unknown = sorted(set(overrides) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    config.update(overrides)

    for key in _POSITIVE_KEYS:
        value = config[key]
        if not isinstance(value, int) or value <= 0:
            raise ValueError(f"Config value '{key}' must be a positive integer, got {value!r}")

    for key in ("spawn_x", "spawn_y"):
        if not isinstance(config[key], int):
            raise ValueError(f"Config value '{key}' must be an integer, got {config[key]!r}")
    max_x = config["cols"] - _MAX_SHAPE_SIZE
    if not 0 <= config["spawn_x"] <= max_x:
        raise ValueError(f"Config value 'spawn_x' must be between 0 and {max_x}, got {config['spawn_x']}")
    max_y = config["rows"] - _MAX_SHAPE_SIZE
    if config["spawn_y"] > max_y:
        raise ValueError(f"Config value 'spawn_y' must be at most {max_y}, got {config['spawn_y']}")
    return config


def load_config(config_path: str | pathlib.Path) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dict of configuration key-value pairs, defaults filled in.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the file holds unknown keys or invalid values.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping: {config_path}")
    return merge_config(data)
