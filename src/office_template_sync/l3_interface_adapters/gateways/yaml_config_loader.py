"""Gateway: YAML configuration loader with default-path discovery and deep merge."""

from __future__ import annotations

from pathlib import Path

import yaml

from office_template_sync.l3_interface_adapters.gateways.paths import DEFAULT_CONFIG_PATHS


class YamlConfigLoader:
    """Reads YAML config files with merge and override support. Validation is left to the caller."""

    def load_raw(
        self,
        config_path: str | None = None,
        overrides: dict | None = None,
    ) -> dict:
        """Return the merged YAML data as a raw dict (before Pydantic validation)."""
        return _load_data(config_path, overrides)


def _read_yaml(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8')) or {}
    except yaml.YAMLError as e:
        raise ValueError(f'Invalid YAML in {path}: {e}') from e
    if not isinstance(data, dict):
        raise ValueError(f'Config file {path} must contain a mapping, got {type(data).__name__}')
    return data


def _load_data(
    config_path: str | None = None,
    overrides: dict | None = None,
) -> dict:
    """Resolve, read, and merge YAML config into a plain dict."""
    data: dict = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f'Config file not found: {path}')
        data = _read_yaml(path)
    else:
        for default_path in DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                data = _read_yaml(default_path)
                break
    if overrides:
        deep_merge(data, overrides)
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
