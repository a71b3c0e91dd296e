"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from office_template_sync.l1_entities.artifact import LocalArtifact, RemoteResource
from office_template_sync.l1_entities.config import AppConfig
from office_template_sync.l1_entities.errors import FetchError, LocalStateError, ResolutionError
from office_template_sync.l1_entities.template import ApplicationKind
from office_template_sync.l4_frameworks_and_drivers.config import build_app_config

BASE_URL = 'https://templates.example.com/office'
T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

# --- Protocol-conforming Fakes ---


class FakeFetcher:
    """Fake fetcher serving RemoteResources from a dict keyed by URI."""

    def __init__(self, resources: dict[str, RemoteResource] | None = None) -> None:
        self._resources = dict(resources or {})
        self.fetch_calls: list[str] = []

    def fetch(self, uri: str) -> RemoteResource:
        self.fetch_calls.append(uri)
        if uri not in self._resources:
            raise FetchError(f'{uri}: HTTP 404 Not Found')
        return self._resources[uri]

    def serve(self, name: str, payload: bytes, reported_timestamp: datetime | None = T0) -> None:
        uri = f'{BASE_URL}/{name}'
        self._resources[uri] = RemoteResource(uri=uri, payload=payload, reported_timestamp=reported_timestamp)


class FakePathResolver:
    """Fake resolver mapping every kind under one root, one sub-dir per kind."""

    def __init__(self, root: Path = Path('/templates'), failing: set[ApplicationKind] | None = None) -> None:
        self._root = root
        self._failing = failing or set()
        self.resolve_calls: list[ApplicationKind] = []

    def resolve(self, kind: ApplicationKind) -> Path:
        self.resolve_calls.append(kind)
        if kind in self._failing:
            raise ResolutionError(f'{kind.value} is not installed')
        return self._root / kind.value


class FakeTemplateStore:
    """In-memory template store recording every call."""

    def __init__(self) -> None:
        self.files: dict[Path, tuple[bytes, datetime]] = {}
        self.directories: set[Path] = set()
        self.unreadable: set[Path] = set()
        self.uninspectable: set[Path] = set()
        self.ensure_calls: list[Path] = []
        self.inspect_calls: list[Path] = []
        self.read_calls: list[Path] = []
        self.write_calls: list[tuple[Path, bytes]] = []
        self.clock = T0

    def ensure_directory(self, directory: Path) -> None:
        self.ensure_calls.append(directory)
        self.directories.add(directory)

    def inspect(self, path: Path) -> LocalArtifact:
        self.inspect_calls.append(path)
        if path in self.uninspectable:
            raise LocalStateError(f'Cannot inspect {path}: Permission denied')
        if path not in self.files:
            return LocalArtifact(path=path, exists=False)
        return LocalArtifact(path=path, exists=True, modified_time=self.files[path][1])

    def read_bytes(self, path: Path) -> bytes:
        self.read_calls.append(path)
        if path in self.unreadable:
            raise PermissionError(13, 'Permission denied', str(path))
        return self.files[path][0]

    def write_atomic(self, path: Path, data: bytes) -> None:
        self.write_calls.append((path, data))
        self.files[path] = (data, self.clock)

    def put(self, path: Path, data: bytes, modified_time: datetime = T0) -> None:
        self.files[path] = (data, modified_time)

    @property
    def touched(self) -> bool:
        return bool(self.ensure_calls or self.inspect_calls or self.read_calls or self.write_calls)


# --- Standard Fixtures ---


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def fake_resolver() -> FakePathResolver:
    return FakePathResolver()


@pytest.fixture
def fake_store() -> FakeTemplateStore:
    return FakeTemplateStore()


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({'sync': {'folder': 'Contoso', 'download_url': BASE_URL}})


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = f"""\
sync:
  folder: "Contoso"
  download_url: "{BASE_URL}"
  strategy: "timestamp"
  templates:
    - "Letter.dotx"
    - "Budget.xltx"
directories:
  word: "{tmp_path / 'word'}"
http:
  timeout: 5
office:
  version: "15.0"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
