"""Port: local template storage."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from office_template_sync.l1_entities.artifact import LocalArtifact


class TemplateStore(Protocol):
    """Abstract filesystem access for the local template copies."""

    def ensure_directory(self, directory: Path) -> None:
        """Create *directory* and parents if absent. Raises DirectoryCreationError."""
        ...

    def inspect(self, path: Path) -> LocalArtifact:
        """Describe the local file at *path* without reading its content. Raises LocalStateError."""
        ...

    def read_bytes(self, path: Path) -> bytes:
        """Read the local file. Raises OSError when it cannot be read."""
        ...

    def write_atomic(self, path: Path, data: bytes) -> None:
        """Replace *path* with *data* so readers never see a partial file. Raises WriteError."""
        ...
