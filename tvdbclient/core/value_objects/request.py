"""
Objets valeur pour la construction des requetes TVDB.

Objets valeur immutables decrivant une requete sortante et la configuration
du client capturee au moment de l'envoi.
Tous les objets valeur utilisent @dataclass(frozen=True) pour garantir l'immutabilité.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ResponseType(Enum):
    """Format attendu du corps de la reponse.

    Valeurs:
        XML: Document XML (dialecte historique)
        ZIP: Archive ZIP contenant "<langue>.xml" (dialecte historique)
        JSON: Document JSON (dialecte JWT)
    """

    XML = "xml"
    ZIP = "zip"
    JSON = "json"


@dataclass(frozen=True)
class ClientConfig:
    """
    Instantane de la configuration d'un client.

    Capture au moment de l'envoi pour qu'une requete en vol ne voie jamais
    un changement de langue ou de token ulterieur.

    Attributs:
        token: Cle API (dialecte historique) ou JWT (dialecte JSON)
        language: Code langue ISO 639-1
        base_url: URL de base du dialecte
    """

    token: Optional[str]
    language: str
    base_url: str


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Description d'une requete HTTP unique.

    Attributs:
        url: URL absolue, ou chemin relatif a l'URL de base du client HTTP
        response_type: Format attendu du corps (XML, ZIP, JSON)
        language: Langue active a l'envoi (nom de l'entree ZIP)
        method: Methode HTTP
        params: Parametres de query string
        headers: Headers additionnels
        json: Corps JSON (POST /login)
        encoding: Encodage texte force pour les reponses XML
    """

    url: str
    response_type: ResponseType
    language: str = "en"
    method: str = "GET"
    params: Optional[dict[str, Any]] = None
    headers: dict[str, str] = field(default_factory=dict)
    json: Optional[dict[str, Any]] = None
    encoding: Optional[str] = None
