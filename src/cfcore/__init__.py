"""
cfcore package initializer.

This file exposes the public API of the package:
 - AsyncCFCoreClient (asyncio client, httpx)
 - CFCoreClient (blocking client, requests)
 - create_client / create_async_client (factories reading CURSEFORGE_* env vars)
 - CFCoreError / ErrorKind (the error type every client call can raise)
 - request options/bodies from `params` and response types from `types_models`

Avoid heavy work at import time.
"""

__version__ = "0.1.0"

from .exceptions import CFCoreError, ErrorKind, map_http_status
from .types_models import *  # noqa: F401,F403
from .types_models import __all__ as _types_all
from .params import (
    GetFeaturedModsRequestBody,
    GetFuzzyMatchesRequestBody,
    GetFingerprintMatchesRequestBody,
    GetModFilesOptions,
    GetModFilesRequestBody,
    GetModsByIdsListRequestBody,
    PaginationOptions,
    SearchModsOptions,
)
from .endpoints import DEFAULT_BASE_URL, CFCoreURLS
from .client import CFCoreClient
from .async_client import AsyncCFCoreClient
from .config import CFCoreSettings, create_async_client, create_client
from .utils import logger_setup

__all__ = [
    "__version__",
    "AsyncCFCoreClient",
    "CFCoreClient",
    "create_client",
    "create_async_client",
    "CFCoreSettings",
    "CFCoreError",
    "ErrorKind",
    "map_http_status",
    "DEFAULT_BASE_URL",
    "CFCoreURLS",
    "PaginationOptions",
    "SearchModsOptions",
    "GetModFilesOptions",
    "GetModsByIdsListRequestBody",
    "GetFeaturedModsRequestBody",
    "GetModFilesRequestBody",
    "GetFingerprintMatchesRequestBody",
    "GetFuzzyMatchesRequestBody",
    "logger_setup",
] + list(_types_all)
