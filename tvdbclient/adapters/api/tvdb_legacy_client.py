"""
Client TVDB pour l'API historique (XML/ZIP).

Chaque methode construit l'URL de son endpoint, envoie une requete unique,
decode la reponse XML (ou l'archive ZIP contenant "<langue>.xml") et
extrait la sous-arborescence utile.

Reference API: http://www.thetvdb.com/wiki/index.php?title=Programmers_API
"""

from datetime import date, datetime
from typing import Any, Optional, Union

import httpx

from tvdbclient.adapters.api.callbacks import Callback, settle
from tvdbclient.adapters.api.errors import InvalidArgumentError
from tvdbclient.adapters.api.normalizers import (
    attach_episodes,
    ensure_list,
    pluck,
    resolve_remote_provider,
)
from tvdbclient.adapters.api.pipeline import Normaliser, fetch
from tvdbclient.core.value_objects import ClientConfig, RequestDescriptor, ResponseType
from tvdbclient.utils.constants import DEFAULT_LANGUAGE, LEGACY_BASE_URL, UPDATE_INTERVALS
from tvdbclient.utils.helpers import parse_pipe_list

SeriesId = Union[int, str]


class TVDBLegacyClient:
    """
    Client TVDB pour l'API historique a base de fichiers XML.

    La cle API fait office de token et apparait dans le chemin des URLs.
    Chaque methode retourne une coroutine et accepte un callback optionnel
    callback(error, result) pour les appelants qui n'utilisent pas await.

    Attributes:
        BASE_URL: URL de base de l'API historique

    Example:
        client = TVDBLegacyClient(token="your-api-key", language="fr")
        series = await client.get_series_by_name("Breaking Bad")
        full = await client.get_series_all_by_id(81189)
        await client.close()
    """

    BASE_URL = LEGACY_BASE_URL

    parse_pipe_list = staticmethod(parse_pipe_list)

    def __init__(
        self,
        token: str,
        language: str = DEFAULT_LANGUAGE,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le client historique.

        Args:
            token: Cle API TVDB (obligatoire)
            language: Code langue ISO 639-1 (defaut "en")
            base_url: URL de base alternative (miroir, tests)
            http_client: Client httpx partage; il n'est pas ferme par close()

        Raises:
            ValueError: Si le token est vide
        """
        if not token:
            raise ValueError("Access token must be set.")
        self.token = token
        self.language = language
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._client = http_client
        self._owns_client = http_client is None

    def set_language(self, language: str) -> "TVDBLegacyClient":
        """Change la langue des requetes suivantes."""
        self.language = language
        return self

    def _snapshot(self) -> ClientConfig:
        return ClientConfig(token=self.token, language=self.language, base_url=self.base_url)

    async def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, cree s'il n'existe pas.

        Utilise un client unique pour beneficier du connection pooling.
        """
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    async def _fetch(
        self,
        config: ClientConfig,
        path: str,
        normalise: Normaliser,
        params: Optional[dict[str, Any]] = None,
        response_type: ResponseType = ResponseType.XML,
    ) -> Any:
        descriptor = RequestDescriptor(
            url=f"{config.base_url}{path}",
            response_type=response_type,
            language=config.language,
            params=params,
        )
        client = await self._get_client()
        return await fetch(client, descriptor, normalise)

    async def _request(
        self,
        config: ClientConfig,
        path: str,
        normalise: Normaliser,
        callback: Optional[Callback],
        params: Optional[dict[str, Any]] = None,
        response_type: ResponseType = ResponseType.XML,
    ) -> Any:
        return await settle(
            self._fetch(config, path, normalise, params, response_type), callback
        )

    async def get_languages(self, callback: Optional[Callback] = None) -> Optional[list[dict]]:
        """
        Liste les langues disponibles.

        http://www.thetvdb.com/wiki/index.php?title=API:languages.xml
        """
        config = self._snapshot()
        return await self._request(
            config,
            f"/{config.token}/languages.xml",
            lambda response: ensure_list(pluck(response, "Languages", "Language")),
            callback,
        )

    async def get_time(self, callback: Optional[Callback] = None) -> Optional[str]:
        """Retourne l'heure courante du serveur (timestamp unix)."""
        config = self._snapshot()
        return await self._request(
            config,
            "/Updates.php",
            lambda response: pluck(response, "Items", "Time"),
            callback,
            params={"type": "none"},
        )

    async def get_series_by_name(
        self, name: str, callback: Optional[Callback] = None
    ) -> Optional[list[dict]]:
        """
        Recherche des series par nom.

        http://www.thetvdb.com/wiki/index.php?title=API:GetSeries

        Args:
            name: Nom (ou partie du nom) de la serie
            callback: callback(error, result) optionnel

        Returns:
            Liste des series trouvees, ou None si aucune
        """
        config = self._snapshot()
        return await self._request(
            config,
            "/GetSeries.php",
            lambda response: ensure_list(pluck(response, "Data", "Series")),
            callback,
            params={"seriesname": name, "language": config.language},
        )

    async def get_series_by_id(
        self, series_id: SeriesId, callback: Optional[Callback] = None
    ) -> Optional[dict]:
        """
        Recupere l'enregistrement de base d'une serie.

        http://www.thetvdb.com/wiki/index.php?title=API:Base_Series_Record
        """
        config = self._snapshot()
        return await self._request(
            config,
            f"/{config.token}/series/{series_id}/{config.language}.xml",
            lambda response: pluck(response, "Data", "Series"),
            callback,
        )

    async def get_series_by_remote_id(
        self, remote_id: str, callback: Optional[Callback] = None
    ) -> Optional[dict]:
        """
        Recupere une serie par identifiant externe (IMDB ou zap2it).

        http://www.thetvdb.com/wiki/index.php?title=API:GetSeriesByRemoteID

        Args:
            remote_id: ID IMDB ("tt...") ou zap2it ("EP...")
            callback: callback(error, result) optionnel

        Raises:
            InvalidArgumentError: Si l'identifiant n'appartient a aucun
                fournisseur connu (transmise au callback s'il est fourni)
        """
        return await settle(self._fetch_by_remote_id(self._snapshot(), remote_id), callback)

    async def _fetch_by_remote_id(self, config: ClientConfig, remote_id: str) -> Any:
        provider = resolve_remote_provider(remote_id)
        return await self._fetch(
            config,
            "/GetSeriesByRemoteID.php",
            lambda response: pluck(response, "Data", "Series"),
            params={provider: remote_id, "language": config.language},
        )

    async def get_series_all_by_id(
        self, series_id: SeriesId, callback: Optional[Callback] = None
    ) -> Optional[dict]:
        """
        Recupere l'enregistrement complet d'une serie avec ses episodes.

        L'archive ZIP contient un document par langue; seul "<langue>.xml"
        est lu. Les episodes sont rattaches a la serie sous la cle "Episodes".

        http://www.thetvdb.com/wiki/index.php?title=API:Full_Series_Record
        """
        config = self._snapshot()
        return await self._request(
            config,
            f"/{config.token}/series/{series_id}/all/{config.language}.zip",
            attach_episodes,
            callback,
            response_type=ResponseType.ZIP,
        )

    async def get_episodes_by_id(
        self, series_id: SeriesId, callback: Optional[Callback] = None
    ) -> Optional[list[dict]]:
        """
        Liste tous les episodes d'une serie.

        http://www.thetvdb.com/wiki/index.php?title=API:Full_Series_Record
        """
        config = self._snapshot()
        return await self._request(
            config,
            f"/api/{config.token}/series/{series_id}/all/{config.language}.xml",
            lambda response: ensure_list(pluck(response, "Data", "Episode")),
            callback,
        )

    async def get_episode_by_id(
        self, episode_id: SeriesId, callback: Optional[Callback] = None
    ) -> Optional[dict]:
        """
        Recupere l'enregistrement de base d'un episode.

        http://www.thetvdb.com/wiki/index.php?title=API:Base_Episode_Record
        """
        config = self._snapshot()
        return await self._request(
            config,
            f"/{config.token}/episodes/{episode_id}/{config.language}.xml",
            lambda response: pluck(response, "Data", "Episode"),
            callback,
        )

    async def get_episode_by_air_date(
        self,
        series_id: SeriesId,
        air_date: Union[str, date],
        callback: Optional[Callback] = None,
    ) -> Optional[dict]:
        """
        Recupere l'episode diffuse a une date donnee.

        http://www.thetvdb.com/wiki/index.php?title=API:GetEpisodeByAirDate

        Args:
            series_id: ID TVDB de la serie
            air_date: Date de diffusion ("YYYY-MM-DD" ou date)
            callback: callback(error, result) optionnel
        """
        if isinstance(air_date, date):
            air_date = air_date.strftime("%Y-%m-%d")
        config = self._snapshot()
        return await self._request(
            config,
            "/GetEpisodeByAirDate.php",
            lambda response: pluck(response, "Data", "Episode"),
            callback,
            params={
                "apikey": config.token,
                "seriesid": series_id,
                "airdate": air_date,
                "language": config.language,
            },
        )

    async def get_actors(
        self, series_id: SeriesId, callback: Optional[Callback] = None
    ) -> Optional[list[dict]]:
        """
        Liste les acteurs d'une serie.

        http://www.thetvdb.com/wiki/index.php?title=API:actors.xml
        """
        config = self._snapshot()
        return await self._request(
            config,
            f"/{config.token}/series/{series_id}/actors.xml",
            lambda response: ensure_list(pluck(response, "Actors", "Actor")),
            callback,
        )

    async def get_banners(
        self, series_id: SeriesId, callback: Optional[Callback] = None
    ) -> Optional[list[dict]]:
        """
        Liste les banners, posters et fanarts d'une serie.

        http://www.thetvdb.com/wiki/index.php?title=API:banners.xml
        """
        config = self._snapshot()
        return await self._request(
            config,
            f"/{config.token}/series/{series_id}/banners.xml",
            lambda response: ensure_list(pluck(response, "Banners", "Banner")),
            callback,
        )

    async def get_updates(
        self, time: Union[int, datetime], callback: Optional[Callback] = None
    ) -> Optional[dict]:
        """
        Liste les series et episodes modifies depuis un timestamp unix.

        http://www.thetvdb.com/wiki/index.php?title=API:Updates

        Returns:
            Noeud "Items" (Time, Series, Episode)
        """
        if isinstance(time, datetime):
            time = int(time.timestamp())
        config = self._snapshot()
        return await self._request(
            config,
            "/Updates.php",
            lambda response: pluck(response, "Items"),
            callback,
            params={"type": "all", "time": time},
        )

    async def get_update_records(
        self, interval: str, callback: Optional[Callback] = None
    ) -> Optional[dict]:
        """
        Recupere le fichier de mises a jour d'un intervalle.

        http://www.thetvdb.com/wiki/index.php?title=API:Update_Records

        Args:
            interval: "day", "week", "month" ou "all"
            callback: callback(error, result) optionnel

        Raises:
            InvalidArgumentError: Si l'intervalle n'est pas reconnu
                (transmise au callback s'il est fourni)
        """
        return await settle(self._fetch_update_records(self._snapshot(), interval), callback)

    async def _fetch_update_records(self, config: ClientConfig, interval: str) -> Any:
        if interval not in UPDATE_INTERVALS:
            raise InvalidArgumentError(
                f"Invalid interval {interval!r}, expected one of {sorted(UPDATE_INTERVALS)}"
            )
        return await self._fetch(
            config,
            f"/{config.token}/updates/updates_{interval}.xml",
            lambda response: pluck(response, "Data"),
        )

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "TVDBLegacyClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
