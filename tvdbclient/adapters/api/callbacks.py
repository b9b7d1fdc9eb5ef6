"""
Adaptateur pour les appelants qui preferent un callback a un await.

Le coeur de la librairie ne connait que les coroutines; settle() convertit
leur issue en un unique appel callback(error, result).
"""

from typing import Any, Awaitable, Callable, Optional, TypeVar

from tvdbclient.adapters.api.errors import TVDBError

T = TypeVar("T")

Callback = Callable[[Optional[TVDBError], Any], Any]


async def settle(
    operation: Awaitable[T],
    callback: Optional[Callback] = None,
) -> Optional[T]:
    """
    Attend une operation et notifie le callback exactement une fois.

    Sans callback, le resultat est retourne et les erreurs propagees.
    Avec callback, une TVDBError est transmise au callback uniquement et
    la coroutine retourne None.

    Args:
        operation: Coroutine d'un endpoint
        callback: Fonction callback(error, result) optionnelle

    Returns:
        Le resultat de l'operation, ou None si l'erreur a ete transmise au callback
    """
    if callback is None:
        return await operation

    try:
        result = await operation
    except TVDBError as error:
        callback(error, None)
        return None

    callback(None, result)
    return result
