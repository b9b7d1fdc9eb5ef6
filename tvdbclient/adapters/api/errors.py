"""
Exceptions levees par les clients TVDB.

Chaque echec est propage a l'appelant, jamais relance ni ignore:
- RequestError : erreur de transport, statut != 200, corps vide ou page 404 HTML
- RemoteAPIError : champ "Error" a la racine de la reponse decodee
- ArchiveError : archive ZIP illisible ou entree "<langue>.xml" absente
- ParseError : corps XML ou JSON mal forme
- InvalidArgumentError : identifiant externe ou intervalle non reconnu
"""

from typing import Optional


class TVDBError(Exception):
    """
    Exception de base des clients TVDB.

    Attributes:
        status_code: Code HTTP de la reponse si connu, sinon None.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class RequestError(TVDBError):
    """
    Exception levee quand la requete n'a pas pu aboutir.

    Couvre les erreurs de transport (status_code None), les statuts != 200,
    les corps vides et les pages "404 Not Found" servies avec un statut 200.
    """

    def __init__(
        self,
        message: str = "Could not complete the request",
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, status_code)


class RemoteAPIError(TVDBError):
    """Erreur applicative signalee par l'API dans le corps de la reponse."""


class ArchiveError(TVDBError):
    """
    Exception levee quand l'archive ZIP ne peut pas etre exploitee.

    Attributes:
        entry: Nom de l'entree recherchee dans l'archive (ex: "en.xml").
    """

    def __init__(self, message: str, entry: Optional[str] = None) -> None:
        self.entry = entry
        super().__init__(message)


class ParseError(TVDBError):
    """Corps de reponse XML ou JSON impossible a decoder."""


class InvalidArgumentError(TVDBError, ValueError):
    """
    Argument refuse avant tout appel reseau.

    Herite de ValueError pour les appelants qui attendent l'exception
    standard, et de TVDBError pour etre transmis au callback.
    """
