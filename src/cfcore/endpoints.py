"""
endpoints.py

The REST surface of the CurseForge Core API (v1).

`CFCoreURLS` holds the relative path templates. Each function below turns
the arguments of one operation into an `EndpointCall`: HTTP method, filled
path, query parameters, JSON body, and the parser for the response body.
Both clients issue these calls; they differ only in transport.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Any, Callable, Dict, Optional

from .params import QueryOptions, RequestBody, json_body, query_params
from .types_models import (
    ApiResponse,
    Category,
    FeaturedModsResponse,
    File,
    FingerprintFuzzyMatchResult,
    FingerprintsMatchesResult,
    Game,
    GameVersionsByType,
    GameVersionType,
    MinecraftGameVersion,
    MinecraftModLoaderIndex,
    Mod,
    as_str,
    list_of,
)

DEFAULT_BASE_URL = "https://api.curseforge.com"


class CFCoreURLS:
    """
    Relative paths of every endpoint. Prepend the client's base URL.

    Notes:
        - All endpoints require the `x-api-key` header.
        - Endpoints marked POST take a JSON body; everything else is GET.
    """

    # Games & versions
    GAMES = "/v1/games"
    """GET → games available to the API key. Query: index, pageSize."""

    GAME = "/v1/games/{gameId}"
    """GET → a single game."""

    GAME_VERSIONS = "/v1/games/{gameId}/versions"
    """GET → version strings grouped by version type."""

    GAME_VERSION_TYPES = "/v1/games/{gameId}/version-types"
    """GET → version types of a game (e.g. 517 for wow_retail)."""

    # Categories
    CATEGORIES = "/v1/categories"
    """GET → categories and classes. Query: gameId, classId, classesOnly."""

    # Mods
    SEARCH_MODS = "/v1/mods/search"
    """GET → mods matching the search filters (see SearchModsOptions)."""

    GET_MOD = "/v1/mods/{modId}"
    """GET → a single mod."""

    GET_MODS = "/v1/mods"
    """POST → mods by id list. Body: { "modIds": [...] }"""

    FEATURED_MODS = "/v1/mods/featured"
    """POST → featured, popular and recently updated mods.
    Body: { "gameId": int, "excludedModIds": [...], "gameVersionTypeId": int }
    """

    GET_MOD_DESCRIPTION = "/v1/mods/{modId}/description"
    """GET → full mod description (HTML)."""

    # Files
    GET_MOD_FILE = "/v1/mods/{modId}/files/{fileId}"
    """GET → a single file of a mod."""

    GET_MOD_FILES = "/v1/mods/{modId}/files"
    """GET → files of a mod, paginated (see GetModFilesOptions)."""

    GET_FILES = "/v1/mods/files"
    """POST → files by id list. Body: { "fileIds": [...] }"""

    GET_MOD_FILE_CHANGELOG = "/v1/mods/{modId}/files/{fileId}/changelog"
    """GET → file changelog (HTML)."""

    GET_MOD_FILE_DOWNLOAD_URL = "/v1/mods/{modId}/files/{fileId}/download-url"
    """GET → direct download URL of a file."""

    # Fingerprints
    FINGERPRINTS = "/v1/fingerprints"
    """POST → exact fingerprint matches across all games. Body: { "fingerprints": [...] }"""

    FINGERPRINTS_BY_GAME = "/v1/fingerprints/{gameId}"
    """POST → exact fingerprint matches within one game."""

    FINGERPRINTS_FUZZY = "/v1/fingerprints/fuzzy"
    """POST → fuzzy matches. Body: { "gameId": int, "fingerprints": [FolderFingerprint] }"""

    FINGERPRINTS_FUZZY_BY_GAME = "/v1/fingerprints/fuzzy/{gameId}"
    """POST → fuzzy matches within one game."""

    # Minecraft
    MINECRAFT_VERSIONS = "/v1/minecraft/version"
    """GET → Minecraft versions. Query: sortDescending."""

    MINECRAFT_MODLOADERS = "/v1/minecraft/modloader"
    """GET → Minecraft mod loader builds. Query: version, includeAll."""


@dataclass(frozen=True)
class EndpointCall:
    """One prepared request: what to send and how to read the answer."""
    method: str
    path: str
    parse: Callable[[Any], Any] = field(repr=False)
    params: Dict[str, Any] = field(default_factory=dict)
    json: Optional[Any] = None


def _require_id(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer id, got {value!r}")
    return value


def build_path(template: str, **path_params: Any) -> str:
    """
    Fill a path template with integer ids.

    Example:
        build_path(CFCoreURLS.GET_MOD_FILE, modId=123, fileId=456)
        -> "/v1/mods/123/files/456"
    """
    ids = {name: _require_id(name, value) for name, value in path_params.items()}
    try:
        return template.format(**ids)
    except KeyError as e:
        raise ValueError(f"missing path parameter {e} for '{template}'") from e


def _envelope(parse_data: Callable[[Any], Any]) -> Callable[[Any], ApiResponse]:
    return partial(ApiResponse.from_dict, parse_data=parse_data)


def _get(path: str, parse_data: Callable[[Any], Any], params: Optional[Dict[str, Any]] = None) -> EndpointCall:
    return EndpointCall("GET", path, _envelope(parse_data), params=params or {})


def _post(path: str, parse_data: Callable[[Any], Any], body: Any) -> EndpointCall:
    return EndpointCall("POST", path, _envelope(parse_data), json=body)


# Games
def get_games(index: Optional[int] = None, page_size: Optional[int] = None) -> EndpointCall:
    return _get(CFCoreURLS.GAMES, list_of(Game.from_dict), query_params(index=index, pageSize=page_size))


def get_game(game_id: int) -> EndpointCall:
    return _get(build_path(CFCoreURLS.GAME, gameId=game_id), Game.from_dict)


def get_versions(game_id: int) -> EndpointCall:
    return _get(build_path(CFCoreURLS.GAME_VERSIONS, gameId=game_id), list_of(GameVersionsByType.from_dict))


def get_version_types(game_id: int) -> EndpointCall:
    return _get(build_path(CFCoreURLS.GAME_VERSION_TYPES, gameId=game_id), list_of(GameVersionType.from_dict))


# Categories
def get_categories(
    game_id: Optional[int] = None,
    class_id: Optional[int] = None,
    classes_only: Optional[bool] = None,
) -> EndpointCall:
    params = query_params(gameId=game_id, classId=class_id, classesOnly=classes_only)
    return _get(CFCoreURLS.CATEGORIES, list_of(Category.from_dict), params)


# Mods
def search_mods(options: QueryOptions) -> EndpointCall:
    return _get(CFCoreURLS.SEARCH_MODS, list_of(Mod.from_dict), query_params(options))


def get_mod(mod_id: int) -> EndpointCall:
    return _get(build_path(CFCoreURLS.GET_MOD, modId=mod_id), Mod.from_dict)


def get_mods(body: RequestBody) -> EndpointCall:
    return _post(CFCoreURLS.GET_MODS, list_of(Mod.from_dict), json_body(body, list_key="modIds"))


def get_featured_mods(body: RequestBody) -> EndpointCall:
    return _post(CFCoreURLS.FEATURED_MODS, FeaturedModsResponse.from_dict, json_body(body))


def get_mod_description(mod_id: int) -> EndpointCall:
    return _get(build_path(CFCoreURLS.GET_MOD_DESCRIPTION, modId=mod_id), as_str)


# Files
def get_mod_file(mod_id: int, file_id: int) -> EndpointCall:
    return _get(build_path(CFCoreURLS.GET_MOD_FILE, modId=mod_id, fileId=file_id), File.from_dict)


def get_mod_files(mod_id: int, options: QueryOptions = None) -> EndpointCall:
    path = build_path(CFCoreURLS.GET_MOD_FILES, modId=mod_id)
    return _get(path, list_of(File.from_dict), query_params(options))


def get_files(body: RequestBody) -> EndpointCall:
    return _post(CFCoreURLS.GET_FILES, list_of(File.from_dict), json_body(body, list_key="fileIds"))


def get_mod_file_changelog(mod_id: int, file_id: int) -> EndpointCall:
    return _get(build_path(CFCoreURLS.GET_MOD_FILE_CHANGELOG, modId=mod_id, fileId=file_id), as_str)


def get_mod_file_download_url(mod_id: int, file_id: int) -> EndpointCall:
    return _get(build_path(CFCoreURLS.GET_MOD_FILE_DOWNLOAD_URL, modId=mod_id, fileId=file_id), as_str)


# Fingerprints
def get_fingerprints_matches(body: RequestBody) -> EndpointCall:
    return _post(
        CFCoreURLS.FINGERPRINTS,
        FingerprintsMatchesResult.from_dict,
        json_body(body, list_key="fingerprints"),
    )


def get_fingerprints_matches_by_game(game_id: int, body: RequestBody) -> EndpointCall:
    return _post(
        build_path(CFCoreURLS.FINGERPRINTS_BY_GAME, gameId=game_id),
        FingerprintsMatchesResult.from_dict,
        json_body(body, list_key="fingerprints"),
    )


def get_fingerprints_fuzzy_matches(body: RequestBody) -> EndpointCall:
    return _post(CFCoreURLS.FINGERPRINTS_FUZZY, FingerprintFuzzyMatchResult.from_dict, json_body(body))


def get_fingerprints_fuzzy_matches_by_game(game_id: int, body: RequestBody) -> EndpointCall:
    return _post(
        build_path(CFCoreURLS.FINGERPRINTS_FUZZY_BY_GAME, gameId=game_id),
        FingerprintFuzzyMatchResult.from_dict,
        json_body(body),
    )


# Minecraft
def get_minecraft_versions(sort_descending: Optional[bool] = None) -> EndpointCall:
    return _get(
        CFCoreURLS.MINECRAFT_VERSIONS,
        list_of(MinecraftGameVersion.from_dict),
        query_params(sortDescending=sort_descending),
    )


def get_minecraft_modloaders(version: Optional[str] = None, include_all: Optional[bool] = None) -> EndpointCall:
    return _get(
        CFCoreURLS.MINECRAFT_MODLOADERS,
        list_of(MinecraftModLoaderIndex.from_dict),
        query_params(version=version, includeAll=include_all),
    )
