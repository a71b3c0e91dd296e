"""Sync decision and per-template outcome records."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from office_template_sync.l1_entities.errors import TemplateSyncError


class SyncDecision(enum.Enum):
    SKIP = 'skip'
    DOWNLOAD = 'download'


class SyncAction(enum.Enum):
    SKIPPED = 'skipped'
    DOWNLOADED = 'downloaded'
    FAILED = 'failed'


class SyncStrategyKind(enum.Enum):
    TIMESTAMP = 'timestamp'
    HASH = 'hash'


@dataclass(frozen=True)
class TemplateSyncResult:
    """Outcome for one requested template — success with an action, or failure with the error."""

    template_name: str
    action: SyncAction
    error: TemplateSyncError | None = None

    @property
    def ok(self) -> bool:
        return self.action is not SyncAction.FAILED

    @property
    def reason(self) -> str:
        if self.error is None:
            return ''
        return f'{type(self.error).__name__}: {self.error}'
