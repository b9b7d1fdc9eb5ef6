"""
Container d'injection de dependances via dependency-injector.

Construit les deux clients TVDB a partir des Settings.
"""

from dependency_injector import containers, providers

from .adapters.api.tvdb_client import TVDBClient
from .adapters.api.tvdb_legacy_client import TVDBLegacyClient
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de tvdbclient.

    Utilisation :
        container = Container()
        legacy = container.legacy_client()
        client = container.client()

    En test, surcharger la configuration :
        container.config.override(Settings(api_key="test"))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Clients API - Factory: chaque appel cree un client avec son propre pool HTTP
    legacy_client = providers.Factory(
        TVDBLegacyClient,
        token=config.provided.api_key,
        language=config.provided.language,
        base_url=config.provided.legacy_base_url,
    )

    client = providers.Factory(
        TVDBClient,
        token=config.provided.token,
        language=config.provided.language,
        api_key=config.provided.api_key,
        base_url=config.provided.api_base_url,
        api_version=config.provided.api_version,
        user_agent=config.provided.user_agent,
    )
