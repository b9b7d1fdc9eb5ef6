"""
Normalisation des structures decodees.

Le parser XML ne transforme pas un element unique en liste: une liste d'un
seul acteur arrive comme un dict nu. Chaque endpoint qui retourne une liste
applique donc ensure_list a la sous-arborescence qu'il extrait.
"""

import re
from collections.abc import Mapping
from typing import Any, Optional

from tvdbclient.adapters.api.errors import InvalidArgumentError
from tvdbclient.utils.constants import REMOTE_PROVIDERS


def pluck(structure: Any, *path: str) -> Any:
    """
    Extrait une sous-arborescence, ou None si un niveau est absent.

    Example:
        pluck({"Data": {"Series": s}}, "Data", "Series") -> s
    """
    current = structure
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def ensure_list(value: Any) -> Optional[list[Any]]:
    """
    Uniformise singulier et pluriel.

    Returns:
        None si la valeur est absente, la liste telle quelle, sinon [value]
    """
    if value is None or isinstance(value, list):
        return value
    return [value]


def attach_episodes(structure: Any) -> Optional[dict[str, Any]]:
    """
    Rattache les episodes d'un enregistrement complet a sa serie.

    L'archive complete contient Data.Series et Data.Episode en freres;
    le resultat est la serie avec une cle "Episodes" supplementaire.

    Returns:
        Copie de Data.Series avec "Episodes", ou None si la serie est absente
    """
    series = pluck(structure, "Data", "Series")
    if not isinstance(series, Mapping):
        return series
    return {**series, "Episodes": ensure_list(pluck(structure, "Data", "Episode"))}


def resolve_remote_provider(
    remote_id: str,
    providers: Optional[Mapping[str, re.Pattern[str]]] = None,
) -> str:
    """
    Determine le fournisseur d'un identifiant externe.

    Les fournisseurs sont testes du dernier enregistre au premier et le
    premier qui reconnait l'identifiant est retenu.

    Args:
        remote_id: Identifiant externe (ex: "tt0903747", "EP00930779")
        providers: Fournisseurs ordonnes nom -> motif (defaut REMOTE_PROVIDERS)

    Returns:
        Nom du parametre de requete du fournisseur (ex: "imdbid")

    Raises:
        InvalidArgumentError: Si aucun fournisseur ne reconnait l'identifiant
    """
    if providers is None:
        providers = REMOTE_PROVIDERS
    for name, pattern in reversed(list(providers.items())):
        if pattern.search(remote_id):
            return name
    raise InvalidArgumentError(f"Unknown remote id provider for {remote_id!r}")
