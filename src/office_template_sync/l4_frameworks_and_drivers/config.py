"""App config defaults and merge — lives in L4, not domain."""

from __future__ import annotations

import copy

from office_template_sync.l1_entities.config import AppConfig
from office_template_sync.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'sync': {
        'folder': '',
        'download_url': '',
        'strategy': 'hash',
        'hash_algorithm': 'sha256',
        'templates': [],
    },
    'directories': {},
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
