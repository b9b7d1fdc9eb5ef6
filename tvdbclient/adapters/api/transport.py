"""
Envoi des requetes HTTP et classification des reponses.

Une invocation = exactement un appel reseau, sans retry ni timeout
specifique (defaut du transport httpx).

La classification est faite en une seule etape explicite avant tout
decodage: une reponse est exploitable si le statut vaut 200 et que le
corps est non vide. Les corps texte contenant "404 Not Found" sont rejetes,
certains miroirs de l'API renvoyant une page HTML 404 avec un statut 200.
"""

from typing import Any, Optional, Union

import httpx
from loguru import logger

from tvdbclient.adapters.api.errors import ParseError, RemoteAPIError, RequestError
from tvdbclient.core.value_objects import RequestDescriptor, ResponseType
from tvdbclient.utils.constants import ERROR_KEY, NOT_FOUND_MARKER


async def send_request(
    client: httpx.AsyncClient,
    descriptor: RequestDescriptor,
) -> httpx.Response:
    """
    Execute la requete decrite par le descripteur.

    Args:
        client: Client httpx async a utiliser
        descriptor: Description de la requete

    Returns:
        httpx.Response brute, non classifiee

    Raises:
        RequestError: Si le transport echoue (connexion, DNS, ...),
                      avec status_code None
    """
    logger.debug(
        "Requete TVDB {method} {url}",
        method=descriptor.method,
        url=descriptor.url,
    )
    try:
        return await client.request(
            descriptor.method,
            descriptor.url,
            params=descriptor.params,
            headers=descriptor.headers or None,
            json=descriptor.json,
        )
    except httpx.HTTPError as e:
        logger.warning("Echec transport TVDB {url}: {error}", url=descriptor.url, error=e)
        raise RequestError(str(e) or "Could not complete the request") from e


def response_ok(
    response: Optional[httpx.Response],
    body: Union[bytes, str, None],
    response_type: ResponseType,
) -> bool:
    """
    Verifie qu'une reponse HTTP est exploitable.

    Args:
        response: Reponse httpx (None si absente)
        body: Corps brut (bytes pour ZIP, texte sinon)
        response_type: Format attendu du corps

    Returns:
        True si la reponse peut etre decodee
    """
    if response is None:
        return False
    if response.status_code != 200:
        return False
    # Octets d'archive toujours acceptes, meme vides: l'extraction tranche
    if response_type is ResponseType.ZIP and isinstance(body, bytes):
        return True
    if not body:
        return False
    if NOT_FOUND_MARKER in body:
        return False
    return True


def _read_text(response: httpx.Response, encoding: Optional[str]) -> str:
    if encoding:
        response.encoding = encoding
    return response.text


def _json_error_message(response: httpx.Response) -> Optional[str]:
    """Extrait le champ "Error" d'un corps JSON d'erreur, s'il existe."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict) and data.get(ERROR_KEY):
        return str(data[ERROR_KEY])
    return None


def classify_response(response: httpx.Response, descriptor: RequestDescriptor) -> Any:
    """
    Classe la reponse en succes ou echec et retourne le corps brut.

    Args:
        response: Reponse httpx
        descriptor: Descripteur de la requete d'origine

    Returns:
        bytes pour ZIP, texte pour XML, structure decodee pour JSON

    Raises:
        RequestError: Statut != 200, corps vide ou page 404 embarquee
        RemoteAPIError: Reponse JSON en echec portant un champ "Error"
        ParseError: Corps JSON invalide
    """
    status = response.status_code
    response_type = descriptor.response_type

    if response_type is ResponseType.JSON:
        if status != 200:
            message = _json_error_message(response)
            logger.warning(
                "Reponse TVDB en echec {url}: HTTP {status}",
                url=descriptor.url,
                status=status,
            )
            if message:
                raise RemoteAPIError(message, status_code=status)
            raise RequestError(status_code=status)
        if not response.content:
            raise RequestError(status_code=status)
        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON document: {e}", status_code=status) from e

    if response_type is ResponseType.ZIP:
        body: Union[bytes, str] = response.content
    else:
        body = _read_text(response, descriptor.encoding)

    if not response_ok(response, body, response_type):
        logger.warning(
            "Reponse TVDB inexploitable {url}: HTTP {status}",
            url=descriptor.url,
            status=status,
        )
        raise RequestError(status_code=status)
    return body
