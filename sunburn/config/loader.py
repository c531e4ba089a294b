"""YAML config loader with hashing and runtime get/set."""

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from sunburn.config.schema import SunburnConfig


def load_config(path: str | Path) -> SunburnConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the default configuration.
    """
    path = Path(path)
    if not path.exists():
        return SunburnConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must be a YAML mapping")
    return SunburnConfig(**raw)


def config_hash(config: SunburnConfig) -> str:
    """Compute a deterministic SHA256 hash of the config."""
    data = config.model_dump_json(indent=None)
    return hashlib.sha256(data.encode()).hexdigest()[:16]


def get_config_value(config: SunburnConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'calculation.max_points'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif isinstance(obj, dict):
            obj = obj[part]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: SunburnConfig, dotted_key: str, value: Any) -> SunburnConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new SunburnConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(value, str):
        if isinstance(old_value, bool):
            value = value.strip().lower() in ("1", "true", "yes", "on")
        elif isinstance(old_value, int):
            value = int(value)
        elif isinstance(old_value, float):
            value = float(value)
        elif isinstance(old_value, list):
            value = [int(v) for v in value.split(",") if v.strip()]
    target[parts[-1]] = value
    return SunburnConfig(**data)
