"""
Client TVDB API JSON (v1.2.0) pour les series TV.

Gere l'authentification JWT: le token est obtenu via /login, envoye en
header Bearer, et rafraichi via /refresh avant expiration. Chaque requete
porte le header Accept versionne "application/vnd.thetvdb.v<version>".

Reference API: https://api-dev.thetvdb.com/swagger
"""

from collections.abc import Iterable
from datetime import datetime, timedelta
from typing import Any, Optional, Union

import httpx

from tvdbclient.adapters.api.errors import TVDBError
from tvdbclient.adapters.api.normalizers import pluck
from tvdbclient.adapters.api.pipeline import Normaliser, fetch
from tvdbclient.core.value_objects import ClientConfig, RequestDescriptor, ResponseType
from tvdbclient.utils.constants import API_BASE_URL, API_VERSION, DEFAULT_LANGUAGE, USER_AGENT

Timestamp = Union[int, datetime]


def _data(response: Any) -> Any:
    return pluck(response, "data")


def _epoch(value: Optional[Timestamp]) -> Optional[int]:
    if isinstance(value, datetime):
        return int(value.timestamp())
    return value


class TVDBClient:
    """
    Client TVDB pour l'API JSON.

    Le token peut etre fourni directement, ou obtenu automatiquement a la
    premiere requete si une cle API est configuree.

    Attributes:
        BASE_URL: URL de base de l'API JSON
        TOKEN_LIFETIME: Age au-dela duquel un token obtenu est rafraichi

    Example:
        client = TVDBClient(api_key="your-api-key", language="fr")
        results = await client.search_series("Breaking Bad")
        episodes = await client.get_series_episodes(81189, page=2)
        await client.close()
    """

    BASE_URL = API_BASE_URL
    # Token valide 24h, rafraichir 1h avant expiration
    TOKEN_LIFETIME = timedelta(hours=23)

    def __init__(
        self,
        token: Optional[str] = None,
        language: str = DEFAULT_LANGUAGE,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        api_version: str = API_VERSION,
        user_agent: str = USER_AGENT,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le client JSON.

        Args:
            token: JWT deja obtenu (optionnel)
            language: Code langue ISO 639-1 envoye en Accept-Language
            api_key: Cle API pour /login (optionnelle si token fourni)
            base_url: URL de base alternative
            api_version: Version de l'API pour le header Accept
            user_agent: Valeur du header User-Agent
            http_client: Client httpx partage; il n'est pas ferme par close()
        """
        self.token = token
        self.language = language
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.api_version = api_version
        self.user_agent = user_agent
        self._api_key = api_key
        self._token_expiry: Optional[datetime] = None
        self._client = http_client
        self._owns_client = http_client is None

    def set_language(self, language: str) -> "TVDBClient":
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

    def _default_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": f"application/vnd.thetvdb.v{self.api_version}",
        }

    def _get_auth_headers(
        self, config: ClientConfig, with_language: bool = True
    ) -> dict[str, str]:
        """
        Retourne les headers d'authentification avec le token JWT.

        Args:
            config: Configuration capturee pour la requete
            with_language: Ajoute Accept-Language avec la langue du client
        """
        headers = self._default_headers()
        headers["Authorization"] = f"Bearer {config.token}"
        if with_language:
            headers["Accept-Language"] = config.language
        return headers

    async def _store_token(self, descriptor: RequestDescriptor) -> str:
        client = await self._get_client()
        token = await fetch(client, descriptor, lambda response: pluck(response, "token"))
        if not token:
            raise TVDBError("Token not in response")
        self.token = token
        self._token_expiry = datetime.now() + self.TOKEN_LIFETIME
        return token

    async def auth(self, api_key: Optional[str] = None) -> str:
        """
        Obtient un token JWT via POST /login.

        https://api-dev.thetvdb.com/swagger#!/Authentication/post_login

        Args:
            api_key: Cle API; defaut celle fournie au constructeur

        Returns:
            Le nouveau token, egalement conserve par le client

        Raises:
            ValueError: Si aucune cle API n'est disponible
        """
        key = api_key or self._api_key
        if not key:
            raise ValueError("API key must be set.")
        self._api_key = key
        descriptor = RequestDescriptor(
            url=f"{self.base_url}/login",
            response_type=ResponseType.JSON,
            language=self.language,
            method="POST",
            headers=self._default_headers(),
            json={"apikey": key},
        )
        return await self._store_token(descriptor)

    async def refresh_token(self) -> str:
        """
        Rafraichit le token JWT courant via GET /refresh.

        https://api-dev.thetvdb.com/swagger#!/Authentication/get_refresh_token
        """
        config = self._snapshot()
        if not config.token:
            raise TVDBError("Access token must be set.")
        descriptor = RequestDescriptor(
            url=f"{config.base_url}/refresh",
            response_type=ResponseType.JSON,
            language=config.language,
            headers=self._get_auth_headers(config, with_language=False),
        )
        return await self._store_token(descriptor)

    async def _ensure_token(self) -> str:
        """
        S'assure qu'un token JWT valide est disponible.

        Obtient un nouveau token si:
        - Aucun token n'existe et une cle API est configuree (login)
        - Le token obtenu par le client est trop ancien (refresh)

        Un token fourni au constructeur n'a pas d'expiration connue.
        """
        if self.token:
            if self._token_expiry is None or datetime.now() < self._token_expiry:
                return self.token
            return await self.refresh_token()
        if self._api_key:
            return await self.auth()
        raise TVDBError("Access token must be set.")

    async def _get(
        self,
        path: str,
        params: Optional[dict[str, Any]] = None,
        normalise: Normaliser = _data,
        with_language: bool = True,
    ) -> Any:
        await self._ensure_token()
        config = self._snapshot()
        if params is not None:
            params = {key: value for key, value in params.items() if value is not None}
        descriptor = RequestDescriptor(
            url=f"{config.base_url}{path}",
            response_type=ResponseType.JSON,
            language=config.language,
            params=params,
            headers=self._get_auth_headers(config, with_language=with_language),
        )
        client = await self._get_client()
        return await fetch(client, descriptor, normalise)

    async def get_languages(self) -> list[dict]:
        """
        Liste les langues disponibles.

        https://api-dev.thetvdb.com/swagger#!/Languages/get_languages
        """
        return await self._get("/languages", with_language=False)

    async def get_language(self, language_id: Union[int, str]) -> dict:
        """Recupere une langue par son ID."""
        return await self._get(f"/languages/{language_id}", with_language=False)

    async def search_series(self, value: str, key: str = "name") -> list[dict]:
        """
        Recherche des series.

        https://api-dev.thetvdb.com/swagger#!/Search/get_search_series

        Args:
            value: Valeur recherchee
            key: Parametre de recherche ("name", "imdbId", "zap2itId")

        Returns:
            Liste des series correspondantes
        """
        return await self._get("/search/series", params={key: value})

    async def search_series_params(self) -> list[str]:
        """Liste les parametres acceptes par search_series."""
        return await self._get(
            "/search/series/params",
            normalise=lambda response: pluck(response, "data", "params"),
        )

    async def get_series(self, series_id: Union[int, str]) -> dict:
        """
        Recupere une serie par son ID.

        https://api-dev.thetvdb.com/swagger#!/Series/get_series_id
        """
        return await self._get(f"/series/{series_id}")

    async def get_series_episodes(self, series_id: Union[int, str], page: int = 1) -> list[dict]:
        """
        Liste une page d'episodes d'une serie.

        Args:
            series_id: ID TVDB de la serie
            page: Numero de page (100 episodes par page)
        """
        return await self._get(f"/series/{series_id}/episodes", params={"page": page or 1})

    async def get_episode(self, episode_id: Union[int, str]) -> dict:
        """Recupere un episode par son ID."""
        return await self._get(f"/episodes/{episode_id}")

    async def get_episode_query(
        self, series_id: Union[int, str], params: Optional[dict[str, Any]] = None
    ) -> list[dict]:
        """
        Recherche des episodes d'une serie.

        https://api-dev.thetvdb.com/swagger#!/Series/get_series_id_episodes_query

        Args:
            series_id: ID TVDB de la serie
            params: Filtres (airedSeason, airedEpisode, page, ...)
        """
        return await self._get(f"/series/{series_id}/episodes/query", params=dict(params or {}))

    async def get_series_episodes_params(self, series_id: Union[int, str]) -> Any:
        """Liste les filtres acceptes par get_episode_query."""
        return await self._get(f"/series/{series_id}/episodes/query/params")

    async def get_series_episode_summaries(self, series_id: Union[int, str]) -> dict:
        """Resume des saisons et episodes d'une serie."""
        return await self._get(f"/series/{series_id}/episodes/summary")

    async def get_series_filter(
        self, series_id: Union[int, str], keys: Union[str, Iterable[str]]
    ) -> dict:
        """
        Recupere une serie restreinte aux champs demandes.

        https://api-dev.thetvdb.com/swagger#!/Series/get_series_id_filter

        Args:
            series_id: ID TVDB de la serie
            keys: Champs a conserver, en CSV ou en iterable
        """
        if not isinstance(keys, str):
            keys = ",".join(keys)
        return await self._get(f"/series/{series_id}/filter", params={"keys": keys})

    async def get_series_filter_params(self, series_id: Union[int, str]) -> Any:
        """Liste les champs acceptes par get_series_filter."""
        return await self._get(f"/series/{series_id}/filter/params")

    async def get_series_images(self, series_id: Union[int, str]) -> dict:
        """Compte les images d'une serie par type."""
        return await self._get(f"/series/{series_id}/images")

    async def get_series_images_query(
        self, series_id: Union[int, str], params: Optional[dict[str, Any]] = None
    ) -> list[dict]:
        """
        Recherche des images d'une serie.

        Args:
            series_id: ID TVDB de la serie
            params: Filtres (keyType, resolution, subKey)
        """
        return await self._get(f"/series/{series_id}/images/query", params=dict(params or {}))

    async def get_series_images_params(self, series_id: Union[int, str]) -> list[dict]:
        """Liste les filtres acceptes par get_series_images_query."""
        return await self._get(f"/series/{series_id}/images/query/params")

    async def get_updates(
        self, from_time: Timestamp, to_time: Optional[Timestamp] = None
    ) -> list[dict]:
        """
        Liste les series modifiees dans un intervalle de temps.

        https://api-dev.thetvdb.com/swagger#!/Updates/get_updated_query

        Args:
            from_time: Debut de l'intervalle (epoch ou datetime)
            to_time: Fin de l'intervalle, omise si None
        """
        return await self._get(
            "/updated/query",
            params={"fromTime": _epoch(from_time), "toTime": _epoch(to_time)},
        )

    async def get_updates_params(self) -> list[str]:
        """Liste les parametres acceptes par get_updates."""
        return await self._get("/updated/query/params")

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "TVDBClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
