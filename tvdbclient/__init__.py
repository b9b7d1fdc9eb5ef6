"""
tvdbclient - Client asynchrone pour l'API TheTVDB.

Deux dialectes independants sont supportes :
- TVDBLegacyClient : API historique (XML, archives ZIP), callbacks optionnels
- TVDBClient : API JSON avec authentification JWT

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Objets valeur (descripteur de requete, configuration capturee)
- adapters/ : Clients HTTP, classification, decodage XML/ZIP, normalisation
- utils/ : Constantes et fonctions utilitaires
"""

from loguru import logger

from tvdbclient.adapters.api import (
    ArchiveError,
    InvalidArgumentError,
    ParseError,
    RemoteAPIError,
    RequestError,
    TVDBClient,
    TVDBError,
    TVDBLegacyClient,
)
from tvdbclient.utils.helpers import parse_pipe_list

# Les applications activent les logs via configure_logging()
logger.disable("tvdbclient")

__all__ = [
    "ArchiveError",
    "InvalidArgumentError",
    "ParseError",
    "RemoteAPIError",
    "RequestError",
    "TVDBClient",
    "TVDBError",
    "TVDBLegacyClient",
    "parse_pipe_list",
]
