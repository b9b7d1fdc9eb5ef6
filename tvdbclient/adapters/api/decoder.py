"""
Decodage des corps de reponse selon leur format.

- JSON : deja structure, transmis tel quel
- XML : parse via parse_xml
- ZIP : extraction de l'entree "<langue>.xml" puis parsing XML

Apres decodage, un champ "Error" a la racine transforme l'appel en echec,
meme si le statut HTTP valait 200.
"""

import io
import zipfile
import zlib
from typing import Any, Optional

from tvdbclient.adapters.api.errors import ArchiveError, RemoteAPIError
from tvdbclient.adapters.parsing.xml_parser import parse_xml
from tvdbclient.core.value_objects import RequestDescriptor, ResponseType
from tvdbclient.utils.constants import ERROR_KEY


def extract_zip_entry(data: bytes, language: str) -> str:
    """
    Extrait le document XML de la langue demandee depuis une archive ZIP.

    Args:
        data: Octets de l'archive
        language: Code langue, l'entree recherchee est "<language>.xml"

    Returns:
        Contenu texte de l'entree

    Raises:
        ArchiveError: Si l'archive est illisible ou l'entree absente
    """
    entry = f"{language}.xml"
    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            with archive.open(entry) as f:
                return f.read().decode("utf-8", errors="replace")
    except KeyError as e:
        raise ArchiveError(f"Entry {entry} not found in archive", entry=entry) from e
    except zipfile.BadZipFile as e:
        raise ArchiveError(f"Could not open archive: {e}", entry=entry) from e
    # Erreurs de decompression de l'entree elle-meme
    except (zlib.error, EOFError, RuntimeError, NotImplementedError) as e:
        raise ArchiveError(f"Could not read entry {entry}: {e}", entry=entry) from e


def check_remote_error(structure: Any, status_code: Optional[int] = 200) -> None:
    """
    Leve RemoteAPIError si la structure porte un champ "Error" a sa racine.

    Raises:
        RemoteAPIError: Avec le texte du champ comme message
    """
    if isinstance(structure, dict) and ERROR_KEY in structure:
        message = structure[ERROR_KEY]
        raise RemoteAPIError("" if message is None else str(message), status_code=status_code)


def decode_body(body: Any, descriptor: RequestDescriptor) -> Any:
    """
    Decode un corps de reponse deja classe comme exploitable.

    Args:
        body: Corps brut retourne par classify_response
        descriptor: Descripteur de la requete (format et langue captee)

    Returns:
        Structure decodee

    Raises:
        ArchiveError: Archive ZIP inexploitable
        ParseError: XML mal forme
        RemoteAPIError: Erreur applicative signalee dans le corps
    """
    if descriptor.response_type is ResponseType.JSON:
        structure = body
    elif descriptor.response_type is ResponseType.ZIP:
        structure = parse_xml(extract_zip_entry(body, descriptor.language))
    else:
        structure = parse_xml(body)

    check_remote_error(structure)
    return structure
