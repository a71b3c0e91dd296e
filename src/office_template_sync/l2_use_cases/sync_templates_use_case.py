"""Use case: sync a batch of templates — resolve, decide, download, collect per-template results."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from urllib.parse import quote, urlsplit

from office_template_sync.l1_entities.errors import ConfigurationError, TemplateSyncError
from office_template_sync.l1_entities.sync_result import SyncAction, SyncDecision, TemplateSyncResult
from office_template_sync.l1_entities.template import ResolvedTarget, TemplateRequest, check_template_name
from office_template_sync.l2_use_cases.ports.fetcher import Fetcher
from office_template_sync.l2_use_cases.ports.path_resolver import PathResolver
from office_template_sync.l2_use_cases.ports.template_store import TemplateStore
from office_template_sync.l2_use_cases.sync_strategies import SyncStrategy

log = logging.getLogger('ots.sync')


def validate_download_url(download_url: str) -> str:
    """Return *download_url* without trailing slashes. Raises ConfigurationError if malformed or not https."""
    parts = urlsplit(download_url.strip())
    if not parts.scheme or not parts.netloc:
        raise ConfigurationError(f'Malformed download URL: {download_url!r}')
    if parts.scheme.lower() != 'https':
        raise ConfigurationError(f'Download URL must use https: {download_url!r}')
    return download_url.strip().rstrip('/')


def remote_uri(download_url: str, template_name: str) -> str:
    return f'{download_url.rstrip("/")}/{quote(template_name)}'


class SyncTemplatesUseCase:
    """Drives one sync run sequentially. A failing template never aborts the batch."""

    def __init__(
        self,
        path_resolver: PathResolver,
        fetcher: Fetcher,
        store: TemplateStore,
        download_url: str,
    ) -> None:
        self._resolver = path_resolver
        self._fetcher = fetcher
        self._store = store
        self._download_url = validate_download_url(download_url)

    def execute(self, requests: Sequence[TemplateRequest], strategy: SyncStrategy) -> list[TemplateSyncResult]:
        if not requests:
            raise ConfigurationError('No template names given')

        log.info(
            'Sync run: %d templates from %s (strategy=%s)',
            len(requests),
            self._download_url,
            strategy.kind.value,
        )
        results = [self._sync_one(request, strategy) for request in requests]

        failed = sum(1 for r in results if not r.ok)
        log.info('Sync run finished: %d ok, %d failed', len(results) - failed, failed)
        return results

    def resolve_target(self, request: TemplateRequest) -> ResolvedTarget:
        """Map a request to its local path.

        Raises InvalidTemplateNameError, UnsupportedExtensionError or ResolutionError.
        """
        name = check_template_name(request.name)
        kind = request.application_kind
        base_dir = self._resolver.resolve(kind)
        directory = Path(base_dir) / request.target_folder
        return ResolvedTarget(local_path=directory / name, application_kind=kind)

    def _sync_one(self, request: TemplateRequest, strategy: SyncStrategy) -> TemplateSyncResult:
        try:
            target = self.resolve_target(request)
            local_path = Path(target.local_path)
            self._store.ensure_directory(Path(target.directory))

            uri = remote_uri(self._download_url, request.name)
            outcome = strategy.evaluate(local_path, uri)
            if outcome.decision is SyncDecision.SKIP:
                log.info('%s is current, skipped', request.name)
                return TemplateSyncResult(request.name, SyncAction.SKIPPED)

            resource = outcome.resource or self._fetcher.fetch(uri)
            self._store.write_atomic(local_path, resource.payload)
            log.info('%s downloaded → %s (%d bytes)', request.name, local_path, len(resource.payload))
            return TemplateSyncResult(request.name, SyncAction.DOWNLOADED)

        except TemplateSyncError as e:
            log.error('%s failed: %s: %s', request.name, type(e).__name__, e)
            return TemplateSyncResult(request.name, SyncAction.FAILED, error=e)
        except Exception as e:
            log.error('%s failed unexpectedly', request.name, exc_info=True)
            err = TemplateSyncError(f'Unexpected error: {type(e).__name__}: {e}')
            err.__cause__ = e
            return TemplateSyncResult(request.name, SyncAction.FAILED, error=err)
