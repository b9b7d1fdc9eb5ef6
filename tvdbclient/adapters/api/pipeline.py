"""
Chaine generique requete -> classification -> decodage -> normalisation.

Tous les endpoints des deux clients passent par fetch().
"""

from typing import Any, Callable, Optional

import httpx
from loguru import logger

from tvdbclient.adapters.api.decoder import decode_body
from tvdbclient.adapters.api.transport import classify_response, send_request
from tvdbclient.core.value_objects import RequestDescriptor

Normaliser = Callable[[Any], Any]


async def fetch(
    client: httpx.AsyncClient,
    descriptor: RequestDescriptor,
    normalise: Optional[Normaliser] = None,
) -> Any:
    """
    Execute une requete et retourne le resultat normalise.

    Args:
        client: Client httpx async
        descriptor: Description de la requete
        normalise: Fonction d'extraction appliquee a la structure decodee

    Returns:
        Resultat de normalise(structure), ou la structure si normalise est None

    Raises:
        TVDBError: Pour tout echec (transport, statut, decodage, erreur distante)
    """
    response = await send_request(client, descriptor)
    body = classify_response(response, descriptor)
    structure = decode_body(body, descriptor)
    logger.debug("Reponse TVDB decodee {url}", url=descriptor.url)
    return normalise(structure) if normalise is not None else structure
