"""
Utilitaires et constantes pour tvdbclient.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from tvdbclient.utils.constants import (
    API_BASE_URL,
    API_VERSION,
    DEFAULT_LANGUAGE,
    LEGACY_BASE_URL,
    REMOTE_PROVIDERS,
    UPDATE_INTERVALS,
)
from tvdbclient.utils.helpers import parse_pipe_list

__all__ = [
    "API_BASE_URL",
    "API_VERSION",
    "DEFAULT_LANGUAGE",
    "LEGACY_BASE_URL",
    "REMOTE_PROVIDERS",
    "UPDATE_INTERVALS",
    "parse_pipe_list",
]
