"""Programmatic entry point — sync named templates from a download URL in one call."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pydantic import ValidationError

from office_template_sync.l1_entities.config import AppConfig
from office_template_sync.l1_entities.errors import ConfigurationError
from office_template_sync.l1_entities.sync_result import SyncStrategyKind, TemplateSyncResult
from office_template_sync.l2_use_cases.ports.fetcher import Fetcher
from office_template_sync.l2_use_cases.ports.path_resolver import PathResolver
from office_template_sync.l2_use_cases.ports.template_store import TemplateStore
from office_template_sync.l4_frameworks_and_drivers.config import build_app_config
from office_template_sync.l4_frameworks_and_drivers.container import DependencyContainer
from office_template_sync.l4_frameworks_and_drivers.infra_config import InfraConfig


def sync_templates(
    template_names: Sequence[str],
    folder_name: str,
    download_url: str,
    strategy_kind: SyncStrategyKind | str = SyncStrategyKind.HASH,
    *,
    hash_algorithm: str = 'sha256',
    directories: Mapping[str, str] | None = None,
    infra: InfraConfig | None = None,
    path_resolver: PathResolver | None = None,
    fetcher: Fetcher | None = None,
    store: TemplateStore | None = None,
) -> list[TemplateSyncResult]:
    """Sync *template_names* into ``<templates dir>/<folder_name>/`` from ``<download_url>/<name>``.

    Returns one result per requested name, in order. Per-template failures are
    reported in the results; only configuration problems raise ConfigurationError.
    """
    if not template_names:
        raise ConfigurationError('No template names given')

    config = config_from_values(
        {
            'sync': {
                'folder': folder_name,
                'download_url': download_url,
                'strategy': strategy_kind.value if isinstance(strategy_kind, SyncStrategyKind) else strategy_kind,
                'hash_algorithm': hash_algorithm,
            },
            'directories': dict(directories or {}),
        }
    )
    return run_sync(config, template_names, infra, path_resolver=path_resolver, fetcher=fetcher, store=store)


def config_from_values(raw: dict) -> AppConfig:
    """Build a validated AppConfig, reporting schema problems as ConfigurationError."""
    try:
        return build_app_config(raw)
    except ValidationError as e:
        problems = '; '.join(f'{".".join(str(p) for p in err["loc"])}: {err["msg"]}' for err in e.errors())
        raise ConfigurationError(f'Invalid configuration: {problems}') from e


def run_sync(
    config: AppConfig,
    template_names: Sequence[str],
    infra: InfraConfig | None = None,
    *,
    path_resolver: PathResolver | None = None,
    fetcher: Fetcher | None = None,
    store: TemplateStore | None = None,
) -> list[TemplateSyncResult]:
    with DependencyContainer(
        config,
        infra,
        path_resolver=path_resolver,
        fetcher=fetcher,
        store=store,
    ) as container:
        return container.controller.run(template_names)
