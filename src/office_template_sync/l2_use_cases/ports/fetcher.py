"""Port: remote template transport."""

from __future__ import annotations

from typing import Protocol

from office_template_sync.l1_entities.artifact import RemoteResource


class Fetcher(Protocol):
    """Abstract byte fetcher. Transport security is the implementation's concern."""

    def fetch(self, uri: str) -> RemoteResource:
        """Fetch payload (and reported timestamp, if any). Raises FetchError on failure."""
        ...
