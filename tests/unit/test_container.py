"""
Tests du container d'injection de dependances.
"""

import pytest

from tvdbclient.adapters.api.tvdb_client import TVDBClient
from tvdbclient.adapters.api.tvdb_legacy_client import TVDBLegacyClient
from tvdbclient.config import Settings
from tvdbclient.container import Container


@pytest.fixture
def container(test_settings: Settings) -> Container:
    container = Container()
    container.config.override(test_settings)
    return container


class TestContainer:
    """Construction des clients depuis les Settings."""

    def test_legacy_client_uses_settings(self, container: Container) -> None:
        client = container.legacy_client()

        assert isinstance(client, TVDBLegacyClient)
        assert client.token == "TESTAPIKEY1234"
        assert client.language == "fr"

    def test_json_client_uses_settings(self, container: Container) -> None:
        client = container.client()

        assert isinstance(client, TVDBClient)
        assert client.token == "test-jwt-token"
        assert client.language == "fr"
        assert client.api_version == "1.2.0"
        assert client.base_url == "https://api-dev.thetvdb.com"

    def test_factory_creates_independent_clients(self, container: Container) -> None:
        first = container.legacy_client()
        second = container.legacy_client()

        first.set_language("de")

        assert first is not second
        assert second.language == "fr"

    def test_legacy_client_requires_api_key(self) -> None:
        container = Container()
        container.config.override(Settings(_env_file=None))

        with pytest.raises(ValueError, match="Access token must be set."):
            container.legacy_client()
