"""Gateway: Office user-templates directory lookup — implements PathResolver port."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from platformdirs import user_documents_path

from office_template_sync.l1_entities.errors import ResolutionError
from office_template_sync.l1_entities.template import ApplicationKind
from office_template_sync.l3_interface_adapters.gateways.paths import OFFICE_TEMPLATES_FOLDER

log = logging.getLogger('ots.paths')

DEFAULT_OFFICE_VERSION = '16.0'

# Registry sub-key name per application under HKCU\Software\Microsoft\Office\<version>
OFFICE_APP_KEYS = {
    ApplicationKind.WORD: 'Word',
    ApplicationKind.EXCEL: 'Excel',
    ApplicationKind.POWERPOINT: 'PowerPoint',
}


def read_personal_templates_setting(kind: ApplicationKind, office_version: str) -> str | None:
    """Read the per-application PersonalTemplates value from the Windows registry, if set."""
    import winreg  # noqa: PLC0415 -- deferred: Windows only

    key_path = rf'Software\Microsoft\Office\{office_version}\{OFFICE_APP_KEYS[kind]}\Options'
    try:
        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, key_path) as key:
            value, _ = winreg.QueryValueEx(key, 'PersonalTemplates')
    except FileNotFoundError:
        return None
    return os.path.expandvars(value) if value else None


class OfficePathResolver:
    """Resolves the base templates directory per application kind.

    Order: explicit override → Office's PersonalTemplates setting (Windows) →
    "Custom Office Templates" in the user's documents folder.
    """

    def __init__(
        self,
        overrides: Mapping[str, str] | None = None,
        office_version: str = DEFAULT_OFFICE_VERSION,
        use_documents_fallback: bool = True,
    ) -> None:
        self._overrides = {k.lower(): v for k, v in (overrides or {}).items() if v}
        self._office_version = office_version
        self._use_documents_fallback = use_documents_fallback
        self._cache: dict[ApplicationKind, Path] = {}

    def resolve(self, kind: ApplicationKind) -> Path:
        if kind in self._cache:
            return self._cache[kind]
        if kind not in OFFICE_APP_KEYS:
            raise ResolutionError(f'Unrecognized application kind: {kind!r}')

        path = self._lookup(kind)
        log.debug('Templates directory for %s: %s', kind.value, path)
        self._cache[kind] = path
        return path

    def _lookup(self, kind: ApplicationKind) -> Path:
        override = self._overrides.get(kind.value)
        if override:
            return Path(override).expanduser()

        if sys.platform == 'win32':
            try:
                setting = read_personal_templates_setting(kind, self._office_version)
            except OSError as e:
                log.warning('Registry lookup for %s templates failed: %s', kind.value, e)
                setting = None
            if setting:
                return Path(setting)

        if not self._use_documents_fallback:
            raise ResolutionError(
                f'No templates directory configured for {OFFICE_APP_KEYS[kind]} '
                f'and Office {self._office_version} integration is unavailable'
            )
        return user_documents_path() / OFFICE_TEMPLATES_FOLDER
