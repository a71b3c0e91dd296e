"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from office_template_sync.l1_entities.config import AppConfig
from office_template_sync.l2_use_cases.ports.fetcher import Fetcher
from office_template_sync.l2_use_cases.ports.path_resolver import PathResolver
from office_template_sync.l2_use_cases.ports.template_store import TemplateStore
from office_template_sync.l3_interface_adapters.controllers.sync_controller import SyncController
from office_template_sync.l3_interface_adapters.gateways.file_template_store import FileTemplateStore
from office_template_sync.l3_interface_adapters.gateways.httpx_fetcher import HttpxFetcher
from office_template_sync.l3_interface_adapters.gateways.office_path_resolver import OfficePathResolver
from office_template_sync.l4_frameworks_and_drivers.infra_config import InfraConfig


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        infra: InfraConfig | None = None,
        *,
        path_resolver: PathResolver | None = None,
        fetcher: Fetcher | None = None,
        store: TemplateStore | None = None,
    ) -> None:
        self.config = config

        _infra = infra or InfraConfig()
        self.path_resolver: PathResolver = path_resolver or OfficePathResolver(
            overrides=config.directories,
            office_version=_infra.office.version,
            use_documents_fallback=_infra.office.documents_fallback,
        )
        self._owned_fetcher: HttpxFetcher | None = None
        if fetcher is None:
            self._owned_fetcher = HttpxFetcher(timeout=_infra.http.timeout, user_agent=_infra.http.user_agent)
            fetcher = self._owned_fetcher
        self.fetcher: Fetcher = fetcher
        self.store: TemplateStore = store or FileTemplateStore()

        try:
            self.controller = SyncController(
                config=config.sync,
                path_resolver=self.path_resolver,
                fetcher=self.fetcher,
                store=self.store,
            )
        except Exception:
            self.close()
            raise

    def close(self) -> None:
        """Release the HTTP client if this container created it."""
        if self._owned_fetcher is not None:
            self._owned_fetcher.close()
            self._owned_fetcher = None

    def __enter__(self) -> DependencyContainer:
        return self

    def __exit__(self, *args) -> None:
        self.close()
