"""
params.py

Request parameter sets (query strings) and request bodies (JSON) for the
CurseForge Core API, plus the marshaling that turns them into wire form.

Every operation accepts either one of the dataclasses below or a plain
mapping with the API's camelCase keys. Marshaling rules:
  - None values are dropped: an omitted filter is absent from the request,
    never sent as an empty or null value. ``0`` is a value and is sent.
  - Enums are sent by value.
  - Booleans in query strings are sent as ``true`` / ``false``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .types_models import FolderFingerprint, ModLoaderType, ModsSearchSortField, SortOrder, serialize
from .utils import encode_query_value, strip_none


def _present(obj: Any) -> Dict[str, Any]:
    """Dataclass fields of `obj` whose value is not None."""
    return {f.name: getattr(obj, f.name) for f in fields(obj) if getattr(obj, f.name) is not None}


# Query parameter sets
@dataclass(frozen=True)
class PaginationOptions:
    """
    index : zero based index of the first item to include.
    pageSize : number of items to include.
    """
    index: Optional[int] = None
    pageSize: Optional[int] = None

    def to_params(self) -> Dict[str, Any]:
        return {k: encode_query_value(v) for k, v in _present(self).items()}


@dataclass(frozen=True)
class SearchModsOptions(PaginationOptions):
    """
    Filters for `search_mods`. Every field is optional.

    Attributes
    ----------
    gameId : filter by game id
    classId : filter by section (class) id
    categoryId : filter by category id
    gameVersion : filter by game version string
    searchFilter : free text search in the mod name and author
    sortField : ModsSearchSortField
    sortOrder : SortOrder
    modLoaderType : ModLoaderType
        Only mods with files for this loader; ``ModLoaderType.ANY`` does not filter.
    gameVersionTypeId : only mods with files tagged with versions of this type
    slug : exact slug match (use together with gameId / classId)
    """
    gameId: Optional[int] = None
    classId: Optional[int] = None
    categoryId: Optional[int] = None
    gameVersion: Optional[str] = None
    searchFilter: Optional[str] = None
    sortField: Optional[ModsSearchSortField] = None
    sortOrder: Optional[SortOrder] = None
    modLoaderType: Optional[ModLoaderType] = None
    gameVersionTypeId: Optional[int] = None
    slug: Optional[str] = None


@dataclass(frozen=True)
class GetModFilesOptions(PaginationOptions):
    """Filters for `get_mod_files`."""
    gameVersionTypeId: Optional[int] = None
    gameVersion: Optional[str] = None
    modLoaderType: Optional[ModLoaderType] = None


# Request bodies
@dataclass(frozen=True)
class GetModsByIdsListRequestBody:
    modIds: List[int] = field(default_factory=list)
    filterPcOnly: Optional[bool] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"modIds": list(self.modIds)}
        if self.filterPcOnly is not None:
            body["filterPcOnly"] = self.filterPcOnly
        return body


@dataclass(frozen=True)
class GetFeaturedModsRequestBody:
    gameId: int
    excludedModIds: List[int] = field(default_factory=list)
    gameVersionTypeId: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"gameId": self.gameId, "excludedModIds": list(self.excludedModIds)}
        if self.gameVersionTypeId is not None:
            body["gameVersionTypeId"] = self.gameVersionTypeId
        return body


@dataclass(frozen=True)
class GetModFilesRequestBody:
    fileIds: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"fileIds": list(self.fileIds)}


@dataclass(frozen=True)
class GetFingerprintMatchesRequestBody:
    fingerprints: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"fingerprints": list(self.fingerprints)}


@dataclass(frozen=True)
class GetFuzzyMatchesRequestBody:
    """Game id plus the fingerprints of each scanned folder."""
    gameId: int
    fingerprints: List[FolderFingerprint] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gameId": self.gameId,
            "fingerprints": [
                fp.to_dict() if isinstance(fp, FolderFingerprint) else dict(fp) for fp in self.fingerprints
            ],
        }


QueryOptions = Union[PaginationOptions, Mapping[str, Any], None]
RequestBody = Union[
    GetModsByIdsListRequestBody,
    GetFeaturedModsRequestBody,
    GetModFilesRequestBody,
    GetFingerprintMatchesRequestBody,
    GetFuzzyMatchesRequestBody,
    Mapping[str, Any],
]


# Marshaling
def query_params(options: QueryOptions = None, **extra: Any) -> Dict[str, Any]:
    """
    Build the query-string mapping for a GET request.

    `options` is a parameter dataclass or a mapping; `extra` are named
    parameters of the operation itself. None values are dropped everywhere.

    Example
    -------
    >>> query_params(SearchModsOptions(gameId=1, index=0, pageSize=20))
    {'index': 0, 'pageSize': 20, 'gameId': 1}
    """
    if options is None:
        params: Dict[str, Any] = {}
    elif isinstance(options, PaginationOptions):
        params = options.to_params()
    elif isinstance(options, Mapping):
        params = {k: encode_query_value(v) for k, v in strip_none(options).items()}
    else:
        raise TypeError(f"query options must be a mapping or a parameter dataclass, got {type(options).__name__}")
    for k, v in strip_none(extra).items():
        params[k] = encode_query_value(v)
    return params


def json_body(body: Any, *, list_key: Optional[str] = None) -> Any:
    """
    Build the JSON body for a POST request.

    A mapping is sent as given, with nested models and enums converted
    to their JSON form. A request-body dataclass is sent as its
    `to_dict()`. When `list_key` is set, a bare sequence of ids is accepted
    as shorthand for ``{list_key: [...]}``.
    """
    if body is None:
        raise ValueError("request body is required")
    if isinstance(body, Mapping):
        return serialize(body)
    if is_dataclass(body) and hasattr(body, "to_dict"):
        return body.to_dict()
    if list_key is not None and isinstance(body, Iterable) and not isinstance(body, (str, bytes)):
        return {list_key: list(body)}
    raise TypeError(f"unsupported request body type: {type(body).__name__}")


__all__ = [
    "PaginationOptions", "SearchModsOptions", "GetModFilesOptions",
    "GetModsByIdsListRequestBody", "GetFeaturedModsRequestBody", "GetModFilesRequestBody",
    "GetFingerprintMatchesRequestBody", "GetFuzzyMatchesRequestBody",
    "QueryOptions", "RequestBody", "query_params", "json_body",
]
