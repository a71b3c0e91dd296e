"""Use case: per-template staleness strategies (timestamp vs. content hash)."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from office_template_sync.l1_entities.artifact import DEFAULT_HASH_ALGORITHM, RemoteResource, content_hash
from office_template_sync.l1_entities.errors import HashComputationError, LocalStateError
from office_template_sync.l1_entities.sync_result import SyncDecision, SyncStrategyKind
from office_template_sync.l2_use_cases.ports.fetcher import Fetcher
from office_template_sync.l2_use_cases.ports.template_store import TemplateStore

log = logging.getLogger('ots.sync')


@dataclass(frozen=True)
class StrategyOutcome:
    """A decision plus the remote resource, if the strategy already fetched it."""

    decision: SyncDecision
    resource: RemoteResource | None = None


class SyncStrategy(Protocol):
    kind: SyncStrategyKind

    def evaluate(self, local_path: Path, remote_uri: str) -> StrategyOutcome: ...

    def decide(self, local_path: Path, remote_uri: str) -> SyncDecision: ...


class _StrategyBase(ABC):
    kind: SyncStrategyKind

    def __init__(self, fetcher: Fetcher, store: TemplateStore) -> None:
        self._fetcher = fetcher
        self._store = store

    @abstractmethod
    def evaluate(self, local_path: Path, remote_uri: str) -> StrategyOutcome:
        """Decide for one template, returning the fetched resource when the decision needed it."""
        pass

    def decide(self, local_path: Path, remote_uri: str) -> SyncDecision:
        return self.evaluate(local_path, remote_uri).decision


class TimestampSyncStrategy(_StrategyBase):
    """Download when the local copy is missing or older than the remote's reported timestamp.

    Clock skew between the local machine and the server is not compensated.
    A remote without a usable timestamp is assumed to be newer.
    """

    kind = SyncStrategyKind.TIMESTAMP

    def evaluate(self, local_path: Path, remote_uri: str) -> StrategyOutcome:
        local = self._store.inspect(local_path)
        if not local.exists:
            log.debug('%s missing locally', local_path.name)
            return StrategyOutcome(SyncDecision.DOWNLOAD)

        resource = self._fetcher.fetch(remote_uri)
        if resource.reported_timestamp is None or local.modified_time is None:
            log.warning('No usable timestamp for %s, assuming remote is newer', remote_uri)
            return StrategyOutcome(SyncDecision.DOWNLOAD, resource)

        if local.modified_time < resource.reported_timestamp:
            log.debug(
                '%s is stale (local %s < remote %s)',
                local_path.name,
                local.modified_time.isoformat(),
                resource.reported_timestamp.isoformat(),
            )
            return StrategyOutcome(SyncDecision.DOWNLOAD, resource)
        return StrategyOutcome(SyncDecision.SKIP, resource)


class HashSyncStrategy(_StrategyBase):
    """Download when the remote payload's content hash differs from the local file's.

    Always transfers the full remote payload, even when nothing changed.
    """

    kind = SyncStrategyKind.HASH

    def __init__(self, fetcher: Fetcher, store: TemplateStore, algorithm: str = DEFAULT_HASH_ALGORITHM) -> None:
        super().__init__(fetcher, store)
        self._algorithm = algorithm

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def evaluate(self, local_path: Path, remote_uri: str) -> StrategyOutcome:
        resource = self._fetcher.fetch(remote_uri)
        remote_hash = resource.content_hash(self._algorithm)

        try:
            local = self._store.inspect(local_path)
        except LocalStateError as e:
            raise HashComputationError(f'Cannot inspect {local_path} for hashing: {e}') from e
        if not local.exists:
            log.debug('%s missing locally', local_path.name)
            return StrategyOutcome(SyncDecision.DOWNLOAD, resource)

        try:
            local_hash = content_hash(self._store.read_bytes(local_path), self._algorithm)
        except OSError as e:
            raise HashComputationError(f'Cannot read {local_path} for hashing: {e}') from e

        if local_hash != remote_hash:
            log.debug('%s hash mismatch (%s %s != %s)', local_path.name, self._algorithm, local_hash, remote_hash)
            return StrategyOutcome(SyncDecision.DOWNLOAD, resource)
        return StrategyOutcome(SyncDecision.SKIP, resource)


def build_strategy(
    kind: SyncStrategyKind,
    fetcher: Fetcher,
    store: TemplateStore,
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> SyncStrategy:
    if kind is SyncStrategyKind.HASH:
        return HashSyncStrategy(fetcher, store, algorithm=hash_algorithm)
    return TimestampSyncStrategy(fetcher, store)
