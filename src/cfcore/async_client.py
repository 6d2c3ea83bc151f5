"""
async_client.py - asyncio client for the CurseForge Core API over httpx.

Each method awaits exactly one HTTP request. Calls share nothing mutable
beyond the client configuration and the httpx connection pool, so many
calls may run concurrently on one instance (e.g. with `asyncio.gather`).

Usage example:
    async with AsyncCFCoreClient(api_key="MY_KEY") as cf:
        response, result = await cf.get_mod(238222)
        print(result.data.name, response.status_code)
"""

from __future__ import annotations

import logging
from typing import *

import httpx

from . import endpoints
from .client import BaseClient
from .endpoints import EndpointCall
from .params import QueryOptions, RequestBody
from .types_models import *
from .utils import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)


class AsyncCFCoreClient(BaseClient):
    """
    Asynchronous client for the CurseForge Core API (v1).

    Parameters
    ----------
    api_key : str
        Required; an empty or missing key raises `CFCoreError` (kind
        `CONFIGURATION`) at construction.
    base_url : Optional[str]
        Defaults to https://api.curseforge.com.
    timeout : float
        Per-request timeout in seconds, enforced by httpx.
    user_agent : str
        User-Agent header value.
    http_client : Optional[httpx.AsyncClient]
        Client to send requests with. When omitted one is created and closed
        by `aclose()`; an injected client is left open for its owner.

    Every method returns `ResponseData(response, result)` where `response`
    is the `httpx.Response` and `result` the parsed `ApiResponse`.

    Raises
    ------
    CFCoreError
        kind SERVICE_UNAVAILABLE (503), INTERNAL_SERVER_ERROR (other 5xx),
        NOT_FOUND (404) or BAD_REQUEST (400), with the
        `httpx.HTTPStatusError` as cause.
    httpx.HTTPError
        Any other failure, unchanged: network errors, timeouts, and statuses
        outside the mapping (401, 403, 429, redirects ...).
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        timeout: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(api_key, base_url, timeout=timeout, user_agent=user_agent)
        self._owns_client = http_client is None
        self.http_client = http_client if http_client is not None else httpx.AsyncClient()

    async def _call(self, call: EndpointCall) -> ResponseData:
        url = self._build_url(call.path)
        logger.debug("CF_REQUEST: %s %s params=%s", call.method, url, call.params)
        resp = await self.http_client.request(
            call.method,
            url,
            params=call.params,
            json=call.json,
            headers=self._make_headers(),
            timeout=self.timeout,
        )
        logger.debug("CF_RESPONSE: %s %s -> %s", call.method, url, resp.status_code)
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as err:
            mapped = self._map_status(call, resp.status_code, err, resp)
            if mapped is None:
                raise
            raise mapped from err
        return ResponseData(resp, call.parse(resp.json()))

    # Games
    async def get_games(
        self, index: Optional[int] = None, page_size: Optional[int] = None
    ) -> ResponseData[httpx.Response, GetGamesResponse]:
        """
        Get all games available to the API key.

        `GET /v1/games`

        Parameters
        ----------
        index : Optional[int]
            Zero based index of the first game to include.
        page_size : Optional[int]
            Number of games to include.

        Returns
        -------
        ResponseData with `result.data` a list of `Game` and `result.pagination`.
        """
        return await self._call(endpoints.get_games(index, page_size))

    async def get_game(self, game_id: int) -> ResponseData[httpx.Response, GetGameResponse]:
        """
        Get a single game.

        `GET /v1/games/{gameId}`

        A private game is only visible to its own API key; for anyone else
        it is NOT_FOUND, same as a game that does not exist.
        """
        return await self._call(endpoints.get_game(game_id))

    async def get_versions(self, game_id: int) -> ResponseData[httpx.Response, GetVersionsResponse]:
        """
        Get the version strings of a game, grouped by version type.

        `GET /v1/games/{gameId}/versions`
        """
        return await self._call(endpoints.get_versions(game_id))

    async def get_version_types(self, game_id: int) -> ResponseData[httpx.Response, GetVersionTypesResponse]:
        """
        Get the version types of a game.

        `GET /v1/games/{gameId}/version-types`

        Games created in the CurseForge Core console have a single version
        type, so this mostly matters for older games with several (World of
        Warcraft, Minecraft).
        """
        return await self._call(endpoints.get_version_types(game_id))

    # Categories
    async def get_categories(
        self,
        game_id: Optional[int] = None,
        class_id: Optional[int] = None,
        classes_only: Optional[bool] = None,
    ) -> ResponseData[httpx.Response, GetCategoriesResponse]:
        """
        Get categories and classes.

        `GET /v1/categories`

        Parameters
        ----------
        game_id : Optional[int]
            All categories of this game.
        class_id : Optional[int]
            Only the categories under this class.
        classes_only : Optional[bool]
            Only the classes (top level categories).
        """
        return await self._call(endpoints.get_categories(game_id, class_id, classes_only))

    # Mods
    async def search_mods(self, options: QueryOptions) -> ResponseData[httpx.Response, SearchModsResponse]:
        """
        Search mods.

        `GET /v1/mods/search`

        Parameters
        ----------
        options : SearchModsOptions or mapping
            Filters, sort and pagination, sent verbatim as the query string.
            Unset filters are not sent.

        Example
        -------
        >>> await cf.search_mods(SearchModsOptions(gameId=432, searchFilter="jei",
        ...                      modLoaderType=ModLoaderType.FORGE, index=0, pageSize=20))
        """
        return await self._call(endpoints.search_mods(options))

    async def get_mod(self, mod_id: int) -> ResponseData[httpx.Response, GetModResponse]:
        """
        Get a single mod.

        `GET /v1/mods/{modId}`
        """
        return await self._call(endpoints.get_mod(mod_id))

    async def get_mods(self, body: RequestBody) -> ResponseData[httpx.Response, GetModsResponse]:
        """
        Get several mods in one request.

        `POST /v1/mods`

        Parameters
        ----------
        body : GetModsByIdsListRequestBody, mapping, or list of mod ids
        """
        return await self._call(endpoints.get_mods(body))

    async def get_featured_mods(self, body: RequestBody) -> ResponseData[httpx.Response, GetFeaturedModsResponse]:
        """
        Get featured, popular and recently updated mods of a game.

        `POST /v1/mods/featured`

        Parameters
        ----------
        body : GetFeaturedModsRequestBody or mapping
            Game id, mod ids to exclude, and optionally a game version type.
        """
        return await self._call(endpoints.get_featured_mods(body))

    async def get_mod_description(self, mod_id: int) -> ResponseData[httpx.Response, StringResponse]:
        """
        Get the full description of a mod as HTML.

        `GET /v1/mods/{modId}/description`
        """
        return await self._call(endpoints.get_mod_description(mod_id))

    # Files
    async def get_mod_file(self, mod_id: int, file_id: int) -> ResponseData[httpx.Response, GetModFileResponse]:
        """
        Get a single file of a mod.

        `GET /v1/mods/{modId}/files/{fileId}`
        """
        return await self._call(endpoints.get_mod_file(mod_id, file_id))

    async def get_mod_files(
        self, mod_id: int, options: QueryOptions = None
    ) -> ResponseData[httpx.Response, GetModFilesResponse]:
        """
        Get the files of a mod.

        `GET /v1/mods/{modId}/files`

        Parameters
        ----------
        mod_id : int
        options : GetModFilesOptions or mapping, optional
            Pagination and game version / loader filters.

        The API answers NOT_FOUND both for an unknown mod and for a filter
        that matches no file.
        """
        return await self._call(endpoints.get_mod_files(mod_id, options))

    async def get_files(self, body: RequestBody) -> ResponseData[httpx.Response, GetFilesResponse]:
        """
        Get several files in one request.

        `POST /v1/mods/files`

        Parameters
        ----------
        body : GetModFilesRequestBody, mapping, or list of file ids
        """
        return await self._call(endpoints.get_files(body))

    async def get_mod_file_changelog(self, mod_id: int, file_id: int) -> ResponseData[httpx.Response, StringResponse]:
        """
        Get the changelog of a file as HTML.

        `GET /v1/mods/{modId}/files/{fileId}/changelog`
        """
        return await self._call(endpoints.get_mod_file_changelog(mod_id, file_id))

    async def get_mod_file_download_url(self, mod_id: int, file_id: int) -> ResponseData[httpx.Response, StringResponse]:
        """
        Get the download URL of a file.

        `GET /v1/mods/{modId}/files/{fileId}/download-url`

        `result.data` is None when the author disabled third party distribution.
        """
        return await self._call(endpoints.get_mod_file_download_url(mod_id, file_id))

    # Fingerprints
    async def get_fingerprints_matches(
        self, body: RequestBody
    ) -> ResponseData[httpx.Response, GetFingerprintMatchesResponse]:
        """
        Find the files matching a list of fingerprints exactly.

        `POST /v1/fingerprints`

        Parameters
        ----------
        body : GetFingerprintMatchesRequestBody, mapping, or list of fingerprints

        SERVICE_UNAVAILABLE is common here while the server rebuilds its
        fingerprint index; retrying is up to the caller.
        """
        return await self._call(endpoints.get_fingerprints_matches(body))

    async def get_fingerprints_matches_by_game(
        self, game_id: int, body: RequestBody
    ) -> ResponseData[httpx.Response, GetFingerprintMatchesResponse]:
        """
        Exact fingerprint matching within one game.

        `POST /v1/fingerprints/{gameId}`
        """
        return await self._call(endpoints.get_fingerprints_matches_by_game(game_id, body))

    async def get_fingerprints_fuzzy_matches(
        self, body: RequestBody
    ) -> ResponseData[httpx.Response, GetFingerprintFuzzyMatchesResponse]:
        """
        Find files using fuzzy matching on folder fingerprints.

        `POST /v1/fingerprints/fuzzy`

        Parameters
        ----------
        body : GetFuzzyMatchesRequestBody or mapping
            Game id and one FolderFingerprint per scanned folder.
        """
        return await self._call(endpoints.get_fingerprints_fuzzy_matches(body))

    async def get_fingerprints_fuzzy_matches_by_game(
        self, game_id: int, body: RequestBody
    ) -> ResponseData[httpx.Response, GetFingerprintFuzzyMatchesResponse]:
        """
        Fuzzy fingerprint matching within one game.

        `POST /v1/fingerprints/fuzzy/{gameId}`
        """
        return await self._call(endpoints.get_fingerprints_fuzzy_matches_by_game(game_id, body))

    # Minecraft
    async def get_minecraft_versions(
        self, sort_descending: Optional[bool] = None
    ) -> ResponseData[httpx.Response, GetMinecraftVersionsResponse]:
        """`GET /v1/minecraft/version`"""
        return await self._call(endpoints.get_minecraft_versions(sort_descending))

    async def get_minecraft_modloaders(
        self, version: Optional[str] = None, include_all: Optional[bool] = None
    ) -> ResponseData[httpx.Response, GetMinecraftModLoadersResponse]:
        """
        Get Minecraft mod loader builds (Forge, Fabric, ...).

        `GET /v1/minecraft/modloader`

        Parameters
        ----------
        version : Optional[str]
            Only builds for this Minecraft version.
        include_all : Optional[bool]
            Include every build instead of latest/recommended only.
        """
        return await self._call(endpoints.get_minecraft_modloaders(version, include_all))

    async def aclose(self) -> None:
        """Close the httpx client if this instance created it."""
        if self._owns_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "AsyncCFCoreClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
