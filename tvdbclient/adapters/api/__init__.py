"""
Clients pour les deux dialectes de l'API TVDB.

- TVDBLegacyClient : API historique (XML, archives ZIP)
- TVDBClient : API JSON avec authentification JWT

Infrastructure partagee:
- fetch : chaine requete -> classification -> decodage -> normalisation
- settle : adaptateur callback(error, result) pour les appelants sans await
- TVDBError et ses sous-classes pour chaque type d'echec
"""

from tvdbclient.adapters.api.callbacks import settle
from tvdbclient.adapters.api.errors import (
    ArchiveError,
    InvalidArgumentError,
    ParseError,
    RemoteAPIError,
    RequestError,
    TVDBError,
)
from tvdbclient.adapters.api.pipeline import fetch
from tvdbclient.adapters.api.tvdb_client import TVDBClient
from tvdbclient.adapters.api.tvdb_legacy_client import TVDBLegacyClient

__all__ = [
    "ArchiveError",
    "InvalidArgumentError",
    "ParseError",
    "RemoteAPIError",
    "RequestError",
    "TVDBClient",
    "TVDBError",
    "TVDBLegacyClient",
    "fetch",
    "settle",
]
