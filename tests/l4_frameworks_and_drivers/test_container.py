"""Tests for DependencyContainer wiring."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from office_template_sync.l1_entities.errors import ConfigurationError
from office_template_sync.l1_entities.template import ApplicationKind
from office_template_sync.l3_interface_adapters.gateways.file_template_store import FileTemplateStore
from office_template_sync.l3_interface_adapters.gateways.httpx_fetcher import HttpxFetcher
from office_template_sync.l3_interface_adapters.gateways.office_path_resolver import OfficePathResolver
from office_template_sync.l4_frameworks_and_drivers.config import build_app_config
from office_template_sync.l4_frameworks_and_drivers.container import DependencyContainer
from office_template_sync.l4_frameworks_and_drivers.infra_config import InfraConfig
from tests.conftest import BASE_URL


class TestDependencyContainer:
    def test_default_wiring(self, default_config):
        with DependencyContainer(default_config) as container:
            assert isinstance(container.path_resolver, OfficePathResolver)
            assert isinstance(container.fetcher, HttpxFetcher)
            assert isinstance(container.store, FileTemplateStore)
            assert container.controller is not None

    def test_infra_settings_reach_fetcher(self, default_config):
        infra = InfraConfig.model_validate({'http': {'timeout': 7, 'user_agent': 'ua/1'}})
        with patch('office_template_sync.l4_frameworks_and_drivers.container.HttpxFetcher') as mock_cls:
            DependencyContainer(default_config, infra).close()
        mock_cls.assert_called_once_with(timeout=7.0, user_agent='ua/1')
        mock_cls.return_value.close.assert_called_once()

    def test_injected_collaborators_used(self, default_config, fake_resolver, fake_fetcher, fake_store):
        container = DependencyContainer(
            default_config,
            path_resolver=fake_resolver,
            fetcher=fake_fetcher,
            store=fake_store,
        )
        assert container.fetcher is fake_fetcher
        assert container.path_resolver is fake_resolver
        assert container.store is fake_store
        container.close()  # injected fetcher is not owned, nothing to close

    def test_bad_url_closes_owned_fetcher(self):
        config = build_app_config({'sync': {'download_url': 'not a url'}})
        with patch('office_template_sync.l4_frameworks_and_drivers.container.HttpxFetcher') as mock_cls:
            with pytest.raises(ConfigurationError):
                DependencyContainer(config)
        mock_cls.return_value.close.assert_called_once()

    def test_directory_overrides_passed_to_resolver(self, tmp_path):
        config = build_app_config({'sync': {'download_url': BASE_URL}, 'directories': {'word': str(tmp_path)}})
        with DependencyContainer(config) as container:
            assert container.path_resolver.resolve(ApplicationKind.WORD) == tmp_path
