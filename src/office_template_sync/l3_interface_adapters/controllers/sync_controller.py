"""SyncController — builds requests and the strategy, runs the use case, formats outcomes."""

from __future__ import annotations

from collections.abc import Sequence

from office_template_sync.l1_entities.config import SyncConfig
from office_template_sync.l1_entities.sync_result import SyncAction, TemplateSyncResult
from office_template_sync.l1_entities.template import TemplateRequest
from office_template_sync.l2_use_cases.ports.fetcher import Fetcher
from office_template_sync.l2_use_cases.ports.path_resolver import PathResolver
from office_template_sync.l2_use_cases.ports.template_store import TemplateStore
from office_template_sync.l2_use_cases.sync_strategies import SyncStrategy, build_strategy
from office_template_sync.l2_use_cases.sync_templates_use_case import SyncTemplatesUseCase


_ACTION_LABELS = {
    SyncAction.DOWNLOADED: 'Downloaded',
    SyncAction.SKIPPED: 'Skipped',
    SyncAction.FAILED: 'Failed',
}


class SyncController:
    """Bridges one configured sync run to the outer layers (CLI, library callers)."""

    def __init__(
        self,
        config: SyncConfig,
        path_resolver: PathResolver,
        fetcher: Fetcher,
        store: TemplateStore,
    ) -> None:
        self._config = config
        self._use_case = SyncTemplatesUseCase(
            path_resolver=path_resolver,
            fetcher=fetcher,
            store=store,
            download_url=config.download_url,
        )
        self.strategy: SyncStrategy = build_strategy(
            config.strategy,
            fetcher,
            store,
            hash_algorithm=config.hash_algorithm,
        )

    def build_requests(self, template_names: Sequence[str]) -> list[TemplateRequest]:
        return [TemplateRequest(name=name.strip(), target_folder=self._config.folder) for name in template_names]

    def run(self, template_names: Sequence[str]) -> list[TemplateSyncResult]:
        """Sync *template_names* in order. Raises ConfigurationError only for an unusable run."""
        return self._use_case.execute(self.build_requests(template_names), self.strategy)


def format_result(result: TemplateSyncResult) -> str:
    line = f'{_ACTION_LABELS[result.action]:<10}  {result.template_name}'
    if result.error is not None:
        line += f'  ({result.reason})'
    return line


def summarize(results: Sequence[TemplateSyncResult]) -> str:
    counts = {action: 0 for action in SyncAction}
    for r in results:
        counts[r.action] += 1
    return (
        f'{len(results)} templates: {counts[SyncAction.DOWNLOADED]} downloaded, '
        f'{counts[SyncAction.SKIPPED]} skipped, {counts[SyncAction.FAILED]} failed'
    )
