"""Template request models and the extension → application kind table."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import PurePath, PurePosixPath, PureWindowsPath

from pydantic import BaseModel, ConfigDict

from office_template_sync.l1_entities.errors import InvalidTemplateNameError, UnsupportedExtensionError


class ApplicationKind(enum.Enum):
    WORD = 'word'
    EXCEL = 'excel'
    POWERPOINT = 'powerpoint'


EXTENSION_KINDS: dict[str, ApplicationKind] = {
    '.dotx': ApplicationKind.WORD,
    '.xltx': ApplicationKind.EXCEL,
    '.potx': ApplicationKind.POWERPOINT,
}


def kind_for_name(name: str) -> ApplicationKind:
    """Map a template file name to its application kind (extension match is case-insensitive)."""
    suffix = PurePath(name).suffix.lower()
    try:
        return EXTENSION_KINDS[suffix]
    except KeyError:
        supported = ', '.join(sorted(EXTENSION_KINDS))
        raise UnsupportedExtensionError(
            f'Unsupported template extension {suffix or "(none)"!r} for {name!r}; expected one of {supported}'
        ) from None


def check_template_name(name: str) -> str:
    """Return *name* if it is a bare file name; anything that could leave the target folder is rejected."""
    if name in ('', '.', '..') or PurePosixPath(name).name != name or PureWindowsPath(name).name != name:
        raise InvalidTemplateNameError(f'Template name must be a plain file name: {name!r}')
    return name


class TemplateRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    target_folder: str

    @property
    def application_kind(self) -> ApplicationKind:
        return kind_for_name(self.name)


@dataclass(frozen=True)
class ResolvedTarget:
    """Where a template lands locally, derived once per request."""

    local_path: PurePath
    application_kind: ApplicationKind

    @property
    def directory(self) -> PurePath:
        return self.local_path.parent
