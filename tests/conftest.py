"""Shared fixtures: sample API payloads and mock transports for both clients."""

import json
import os
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import MagicMock

import httpx
import pytest
import requests

from cfcore import AsyncCFCoreClient, CFCoreClient

# keep a developer's real key out of the tests
os.environ.pop("CURSEFORGE_API_KEY", None)

API_KEY = "test-api-key"


GAME_PAYLOAD = {
    "id": 42,
    "name": "Foo",
    "slug": "foo",
    "dateModified": "2022-11-20T10:15:30.123Z",
    "assets": {"iconUrl": "https://media/icon.png", "tileUrl": "https://media/tile.png", "coverUrl": None},
    "status": 6,
    "apiStatus": 2,
}

FILE_PAYLOAD = {
    "id": 3001,
    "gameId": 432,
    "modId": 7,
    "isAvailable": True,
    "displayName": "Example 1.2.0",
    "fileName": "example-1.2.0.jar",
    "releaseType": 1,
    "fileStatus": 4,
    "hashes": [{"value": "da39a3ee5e6b4b0d3255bfef95601890afd80709", "algo": 1}, {"value": "d41d8cd98f00b204e9800998ecf8427e", "algo": 2}],
    "fileDate": "2023-01-05T08:00:00Z",
    "fileLength": 123456,
    "downloadCount": 99,
    "downloadUrl": "https://edge.forgecdn.net/files/3001/example-1.2.0.jar",
    "gameVersions": ["1.20.1", "Forge"],
    "sortableGameVersions": [
        {
            "gameVersionName": "1.20.1",
            "gameVersionPadded": "0000000001.0000000020.0000000001",
            "gameVersion": "1.20.1",
            "gameVersionReleaseDate": "2023-06-12T00:00:00Z",
            "gameVersionTypeId": 75125,
        }
    ],
    "dependencies": [{"modId": 8, "fileId": 0, "relationType": 3}],
    "alternateFileId": 0,
    "isServerPack": False,
    "fileFingerprint": 123456789,
    "modules": [{"name": "META-INF", "fingerprint": 111}, {"name": "example", "fingerprint": 222}],
}

MOD_PAYLOAD = {
    "id": 7,
    "gameId": 432,
    "name": "Example Mod",
    "slug": "example-mod",
    "links": {"websiteUrl": "https://www.curseforge.com/minecraft/mc-mods/example-mod", "wikiUrl": "", "issuesUrl": None, "sourceUrl": None},
    "summary": "An example.",
    "status": 4,
    "downloadCount": 1000,
    "isFeatured": False,
    "primaryCategoryId": 423,
    "categories": [{"id": 423, "gameId": 432, "name": "Map and Information", "slug": "map-information", "classId": 6, "parentCategoryId": 6}],
    "classId": 6,
    "authors": [{"id": 1, "name": "someone", "url": "https://www.curseforge.com/members/someone"}],
    "logo": {"id": 5, "modId": 7, "title": "logo", "description": "", "thumbnailUrl": "https://media/thumb.png", "url": "https://media/logo.png"},
    "screenshots": [],
    "mainFileId": 3001,
    "latestFiles": [FILE_PAYLOAD],
    "latestFilesIndexes": [
        {"gameVersion": "1.20.1", "fileId": 3001, "filename": "example-1.2.0.jar", "releaseType": 1, "gameVersionTypeId": 75125, "modLoader": 1}
    ],
    "dateCreated": "2020-01-01T00:00:00Z",
    "dateModified": "2023-01-05T08:00:00Z",
    "dateReleased": "2023-01-05T08:00:00Z",
    "allowModDistribution": True,
    "gamePopularityRank": 12,
    "isAvailable": True,
    "thumbsUpCount": 3,
}


@pytest.fixture
def game_payload() -> Dict[str, Any]:
    return json.loads(json.dumps(GAME_PAYLOAD))


@pytest.fixture
def file_payload() -> Dict[str, Any]:
    return json.loads(json.dumps(FILE_PAYLOAD))


@pytest.fixture
def mod_payload() -> Dict[str, Any]:
    return json.loads(json.dumps(MOD_PAYLOAD))


class RecordingTransport:
    """httpx MockTransport that records requests and answers with a fixed or computed response."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._responder = responder
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def mock_api():
    """
    Factory: ``mock_api(status, body)`` -> (AsyncCFCoreClient, RecordingTransport).

    `body` may also be a callable taking the request, or an exception
    instance to raise from the transport.
    """

    def _make(status: int = 200, body: Any = None, *, base_url: Optional[str] = None):
        def responder(request: httpx.Request) -> httpx.Response:
            if isinstance(body, Exception):
                raise body
            if callable(body):
                return body(request)
            return httpx.Response(status, json=body if body is not None else {"data": None})

        recorder = RecordingTransport(responder)
        http_client = httpx.AsyncClient(transport=recorder.transport)
        client = AsyncCFCoreClient(api_key=API_KEY, base_url=base_url, http_client=http_client)
        return client, recorder

    return _make


def make_requests_response(status: int, payload: Any = None, url: str = "https://api.curseforge.com/v1/test") -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = json.dumps(payload if payload is not None else {"data": None}).encode("utf-8")
    resp.headers["Content-Type"] = "application/json"
    resp.encoding = "utf-8"
    resp.url = url
    return resp


@pytest.fixture
def sync_api():
    """
    Factory: ``sync_api(status, body)`` -> (CFCoreClient, session mock).

    The session mock returns a real `requests.Response`, or raises `body`
    when it is an exception instance.
    """

    def _make(status: int = 200, body: Any = None):
        session = MagicMock(spec=requests.Session)
        if isinstance(body, Exception):
            session.request.side_effect = body
        else:
            session.request.return_value = make_requests_response(status, body)
        return CFCoreClient(api_key=API_KEY, session=session), session

    return _make
