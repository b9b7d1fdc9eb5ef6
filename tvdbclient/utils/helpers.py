"""
Fonctions utilitaires partagees dans tvdbclient.

- parse_pipe_list : conversion des listes "|a|b|" de l'API en listes Python
"""

import re

_EDGE_PIPES = re.compile(r"(^\|)|(\|\Z)")


def parse_pipe_list(value: str) -> list[str]:
    """
    Convertit une liste delimitee par des pipes en liste Python.

    L'API historique encode les acteurs, genres et alias sous la forme
    "|Drama|Thriller|". Un seul pipe est retire a chaque extremite.

    Args:
        value: Chaine delimitee par des pipes

    Returns:
        Liste des elements, ex: "|a|b|c|" -> ["a", "b", "c"]
    """
    return _EDGE_PIPES.sub("", value).split("|")
