"""Port: per-application base templates directory."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from office_template_sync.l1_entities.template import ApplicationKind


class PathResolver(Protocol):
    """Abstract lookup of where an application keeps user templates."""

    def resolve(self, kind: ApplicationKind) -> Path:
        """Return the base templates directory for *kind*. Raises ResolutionError on failure."""
        ...
