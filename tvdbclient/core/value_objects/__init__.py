"""
Objets valeur immutables representant une requete et son contexte.

Exports :
- ResponseType : Format du corps de reponse (XML, ZIP, JSON)
- ClientConfig : Instantane token/langue/URL de base d'un client
- RequestDescriptor : Description d'une requete HTTP unique
"""

from tvdbclient.core.value_objects.request import (
    ClientConfig,
    RequestDescriptor,
    ResponseType,
)

__all__ = [
    "ClientConfig",
    "RequestDescriptor",
    "ResponseType",
]
