"""Remote and local views of one template, plus content hashing."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

DEFAULT_HASH_ALGORITHM = 'sha256'


def content_hash(data: bytes, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
    """Hex digest of *data* using *algorithm* (any name hashlib accepts)."""
    return hashlib.new(algorithm, data).hexdigest()


@dataclass(frozen=True)
class RemoteResource:
    """A fetched template. The payload is fetched once and reused for the write."""

    uri: str
    payload: bytes
    reported_timestamp: datetime | None = None

    def content_hash(self, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
        return content_hash(self.payload, algorithm)


@dataclass(frozen=True)
class LocalArtifact:
    path: Path
    exists: bool
    modified_time: datetime | None = None
