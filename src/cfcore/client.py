"""
client.py - CurseForge Core API client (configuration, headers, error mapping, blocking transport)

`BaseClient` holds what every client shares: the API key and base URL,
per-request header construction and the HTTP-status-to-error policy.
`CFCoreClient` issues the calls over a `requests.Session`;
`cfcore.async_client.AsyncCFCoreClient` is the asynchronous equivalent.

Each call is a single attempt: no retries, no caching. On success a call
returns `ResponseData(response, result)`; on a mapped HTTP failure it raises
`CFCoreError` with the transport error as cause; anything else (connection
errors, unmapped statuses) propagates as the transport's own exception.

Usage example:
    from cfcore import CFCoreClient
    with CFCoreClient(api_key="MY_KEY") as cf:
        response, result = cf.get_game(432)
        print(result.data.name)
"""

from __future__ import annotations

import logging
from typing import *

import requests

from . import endpoints
from .endpoints import DEFAULT_BASE_URL, EndpointCall
from .exceptions import CFCoreError, ErrorKind, map_http_status
from .params import QueryOptions, RequestBody
from .types_models import *
from .utils import DEFAULT_USER_AGENT

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


class BaseClient:
    """
    Configuration and request policy shared by the blocking and async clients.

    Parameters
    ----------
    api_key : str
        Your CurseForge Core API key. Required and non-empty; a missing key
        raises `CFCoreError` of kind `CONFIGURATION` right here.
    base_url : Optional[str]
        API root, defaults to https://api.curseforge.com.
    timeout : float
        Per-request timeout in seconds, handed to the transport.
    user_agent : str
        Sent as the User-Agent header.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        timeout: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self._api_key = self._check_api_key(api_key)
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = float(timeout)
        self.user_agent = user_agent

    @staticmethod
    def _check_api_key(api_key: Optional[str]) -> str:
        if not isinstance(api_key, str) or not api_key.strip():
            raise CFCoreError(ErrorKind.CONFIGURATION)
        return api_key

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_api_key(self, api_key: str) -> None:
        """Replace the API key; the next request uses it."""
        self._api_key = self._check_api_key(api_key)

    def set_base_url(self, base_url: str) -> None:
        """
        Change the base URL used for building endpoints.

        Must be an http(s) URL; the trailing slash is stripped.
        """
        if not isinstance(base_url, str) or not base_url.startswith("http"):
            raise ValueError("base_url must be an http/https URL")
        self._base_url = base_url.rstrip("/")

    def _make_headers(self) -> Dict[str, str]:
        # built per request so set_api_key() applies to the next call
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": self.user_agent,
            API_KEY_HEADER: self._api_key,
        }

    def _build_url(self, path: str) -> str:
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._base_url}{path}"

    def _map_status(self, call: EndpointCall, status_code: int, err: BaseException, response: Any) -> Optional[CFCoreError]:
        """Mapped error for a failed response, or None when `err` must propagate unchanged."""
        mapped = map_http_status(status_code, cause=err, response=response)
        if mapped is None:
            logger.debug("CF_ERROR: %s %s -> %s (unmapped)", call.method, call.path, status_code)
        else:
            logger.debug("CF_ERROR: %s %s -> %s (%s)", call.method, call.path, status_code, mapped.kind.value)
        return mapped

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} base_url={self._base_url!r}>"


class CFCoreClient(BaseClient):
    """
    Blocking client for the CurseForge Core API over `requests`.

    Parameters
    ----------
    api_key, base_url, timeout, user_agent :
        See `BaseClient`.
    session : Optional[requests.Session]
        Session to send requests with. When omitted the client creates one
        and closes it in `close()`; an injected session is left open.

    Examples
    --------
    >>> cf = CFCoreClient(api_key="MY_KEY")
    >>> _, result = cf.search_mods(SearchModsOptions(gameId=432, searchFilter="jei", pageSize=5))
    >>> [m.name for m in result.data]
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        *,
        timeout: float = 15.0,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        super().__init__(api_key, base_url, timeout=timeout, user_agent=user_agent)
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def _call(self, call: EndpointCall) -> ResponseData:
        url = self._build_url(call.path)
        logger.debug("CF_REQUEST: %s %s params=%s", call.method, url, call.params)
        resp = self.session.request(
            call.method,
            url,
            params=call.params or None,
            json=call.json,
            headers=self._make_headers(),
            timeout=self.timeout,
            # a redirect is reported to the caller, never followed with the API key
            allow_redirects=False,
        )
        logger.debug("CF_RESPONSE: %s %s -> %s", call.method, url, resp.status_code)
        try:
            resp.raise_for_status()
            if not 200 <= resp.status_code < 300:
                # requests only raises for 4xx/5xx
                raise requests.HTTPError(f"{resp.status_code} Unexpected status for url: {url}", response=resp)
        except requests.HTTPError as err:
            mapped = self._map_status(call, resp.status_code, err, resp)
            if mapped is None:
                raise
            raise mapped from err
        return ResponseData(resp, call.parse(resp.json()))

    # Games
    def get_games(self, index: Optional[int] = None, page_size: Optional[int] = None) -> ResponseData[requests.Response, GetGamesResponse]:
        """GET /v1/games - games available to the API key."""
        return self._call(endpoints.get_games(index, page_size))

    def get_game(self, game_id: int) -> ResponseData[requests.Response, GetGameResponse]:
        """GET /v1/games/{gameId}. Raises NOT_FOUND for private or unknown games."""
        return self._call(endpoints.get_game(game_id))

    def get_versions(self, game_id: int) -> ResponseData[requests.Response, GetVersionsResponse]:
        """GET /v1/games/{gameId}/versions"""
        return self._call(endpoints.get_versions(game_id))

    def get_version_types(self, game_id: int) -> ResponseData[requests.Response, GetVersionTypesResponse]:
        """GET /v1/games/{gameId}/version-types"""
        return self._call(endpoints.get_version_types(game_id))

    # Categories
    def get_categories(
        self,
        game_id: Optional[int] = None,
        class_id: Optional[int] = None,
        classes_only: Optional[bool] = None,
    ) -> ResponseData[requests.Response, GetCategoriesResponse]:
        """GET /v1/categories, filtered by game and/or class."""
        return self._call(endpoints.get_categories(game_id, class_id, classes_only))

    # Mods
    def search_mods(self, options: QueryOptions) -> ResponseData[requests.Response, SearchModsResponse]:
        """GET /v1/mods/search with `options` as the query string."""
        return self._call(endpoints.search_mods(options))

    def get_mod(self, mod_id: int) -> ResponseData[requests.Response, GetModResponse]:
        """GET /v1/mods/{modId}"""
        return self._call(endpoints.get_mod(mod_id))

    def get_mods(self, body: RequestBody) -> ResponseData[requests.Response, GetModsResponse]:
        """POST /v1/mods - body is a GetModsByIdsListRequestBody, a mapping, or a list of mod ids."""
        return self._call(endpoints.get_mods(body))

    def get_featured_mods(self, body: RequestBody) -> ResponseData[requests.Response, GetFeaturedModsResponse]:
        """POST /v1/mods/featured"""
        return self._call(endpoints.get_featured_mods(body))

    def get_mod_description(self, mod_id: int) -> ResponseData[requests.Response, StringResponse]:
        """GET /v1/mods/{modId}/description (HTML)"""
        return self._call(endpoints.get_mod_description(mod_id))

    # Files
    def get_mod_file(self, mod_id: int, file_id: int) -> ResponseData[requests.Response, GetModFileResponse]:
        """GET /v1/mods/{modId}/files/{fileId}"""
        return self._call(endpoints.get_mod_file(mod_id, file_id))

    def get_mod_files(self, mod_id: int, options: QueryOptions = None) -> ResponseData[requests.Response, GetModFilesResponse]:
        """GET /v1/mods/{modId}/files, paginated."""
        return self._call(endpoints.get_mod_files(mod_id, options))

    def get_files(self, body: RequestBody) -> ResponseData[requests.Response, GetFilesResponse]:
        """POST /v1/mods/files - body is a GetModFilesRequestBody, a mapping, or a list of file ids."""
        return self._call(endpoints.get_files(body))

    def get_mod_file_changelog(self, mod_id: int, file_id: int) -> ResponseData[requests.Response, StringResponse]:
        """GET /v1/mods/{modId}/files/{fileId}/changelog (HTML)"""
        return self._call(endpoints.get_mod_file_changelog(mod_id, file_id))

    def get_mod_file_download_url(self, mod_id: int, file_id: int) -> ResponseData[requests.Response, StringResponse]:
        """GET /v1/mods/{modId}/files/{fileId}/download-url"""
        return self._call(endpoints.get_mod_file_download_url(mod_id, file_id))

    # Fingerprints
    def get_fingerprints_matches(self, body: RequestBody) -> ResponseData[requests.Response, GetFingerprintMatchesResponse]:
        """POST /v1/fingerprints"""
        return self._call(endpoints.get_fingerprints_matches(body))

    def get_fingerprints_matches_by_game(
        self, game_id: int, body: RequestBody
    ) -> ResponseData[requests.Response, GetFingerprintMatchesResponse]:
        """POST /v1/fingerprints/{gameId}"""
        return self._call(endpoints.get_fingerprints_matches_by_game(game_id, body))

    def get_fingerprints_fuzzy_matches(self, body: RequestBody) -> ResponseData[requests.Response, GetFingerprintFuzzyMatchesResponse]:
        """POST /v1/fingerprints/fuzzy"""
        return self._call(endpoints.get_fingerprints_fuzzy_matches(body))

    def get_fingerprints_fuzzy_matches_by_game(
        self, game_id: int, body: RequestBody
    ) -> ResponseData[requests.Response, GetFingerprintFuzzyMatchesResponse]:
        """POST /v1/fingerprints/fuzzy/{gameId}"""
        return self._call(endpoints.get_fingerprints_fuzzy_matches_by_game(game_id, body))

    # Minecraft
    def get_minecraft_versions(self, sort_descending: Optional[bool] = None) -> ResponseData[requests.Response, GetMinecraftVersionsResponse]:
        """GET /v1/minecraft/version"""
        return self._call(endpoints.get_minecraft_versions(sort_descending))

    def get_minecraft_modloaders(
        self, version: Optional[str] = None, include_all: Optional[bool] = None
    ) -> ResponseData[requests.Response, GetMinecraftModLoadersResponse]:
        """GET /v1/minecraft/modloader"""
        return self._call(endpoints.get_minecraft_modloaders(version, include_all))

    def close(self) -> None:
        """
        Close the underlying requests session if this client created it.
        """
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "CFCoreClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
