"""Blocking CFCoreClient over a mocked requests.Session."""

from unittest.mock import MagicMock

import pytest
import requests
from requests.adapters import BaseAdapter

from cfcore import (
    CFCoreClient,
    CFCoreError,
    ErrorKind,
    GetModFilesOptions,
    GetModsByIdsListRequestBody,
    ModLoaderType,
    SearchModsOptions,
)


def sent(session):
    """(method, url, kwargs) of the last request made on the session mock."""
    args, kwargs = session.request.call_args
    return args[0], args[1], kwargs


def test_get_game(sync_api, game_payload):
    client, session = sync_api(200, {"data": game_payload})

    response, result = client.get_game(42)

    method, url, kwargs = sent(session)
    assert method == "GET"
    assert url == "https://api.curseforge.com/v1/games/42"
    assert kwargs["params"] is None
    assert kwargs["json"] is None
    assert kwargs["headers"]["x-api-key"] == "test-api-key"
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["timeout"] == 15.0
    assert response.status_code == 200
    assert result.data.id == 42
    assert result.data.assets.iconUrl == "https://media/icon.png"


def test_search_mods_params(sync_api, mod_payload):
    client, session = sync_api(200, {"data": [mod_payload], "pagination": {"index": 0, "pageSize": 20, "resultCount": 1, "totalCount": 1}})

    _, result = client.search_mods(SearchModsOptions(gameId=1, index=0, pageSize=20))

    _, url, kwargs = sent(session)
    assert url.endswith("/v1/mods/search")
    assert kwargs["params"] == {"gameId": 1, "index": 0, "pageSize": 20}
    assert result.data[0].slug == "example-mod"
    assert result.pagination.has_more is False


def test_get_mod_files_filters(sync_api, file_payload):
    client, session = sync_api(200, {"data": [file_payload]})

    client.get_mod_files(7, GetModFilesOptions(modLoaderType=ModLoaderType.FABRIC, pageSize=10))

    _, url, kwargs = sent(session)
    assert url.endswith("/v1/mods/7/files")
    assert kwargs["params"] == {"pageSize": 10, "modLoaderType": 4}


def test_minecraft_modloaders_booleans_as_text(sync_api):
    client, session = sync_api(200, {"data": [{"name": "forge-47.2.0", "gameVersion": "1.20.1", "latest": True, "type": 1}]})

    _, result = client.get_minecraft_modloaders(version="1.20.1", include_all=False)

    _, url, kwargs = sent(session)
    assert url.endswith("/v1/minecraft/modloader")
    assert kwargs["params"] == {"version": "1.20.1", "includeAll": "false"}
    assert result.data[0].type is ModLoaderType.FORGE
    assert result.data[0].recommended is False


def test_get_mods_posts_body(sync_api, mod_payload):
    client, session = sync_api(200, {"data": [mod_payload]})

    client.get_mods(GetModsByIdsListRequestBody(modIds=[7], filterPcOnly=True))

    method, url, kwargs = sent(session)
    assert method == "POST"
    assert url.endswith("/v1/mods")
    assert kwargs["json"] == {"modIds": [7], "filterPcOnly": True}
    assert kwargs["headers"]["Content-Type"] == "application/json"


def test_get_files_from_id_list(sync_api):
    client, session = sync_api(200, {"data": []})
    client.get_files([3001, 3002])
    assert sent(session)[2]["json"] == {"fileIds": [3001, 3002]}


def test_get_mod_description_returns_html(sync_api):
    client, _ = sync_api(200, {"data": "<p>Hello</p>"})
    _, result = client.get_mod_description(7)
    assert result.data == "<p>Hello</p>"


@pytest.mark.parametrize(
    "status, kind",
    [
        (503, ErrorKind.SERVICE_UNAVAILABLE),
        (500, ErrorKind.INTERNAL_SERVER_ERROR),
        (502, ErrorKind.INTERNAL_SERVER_ERROR),
        (404, ErrorKind.NOT_FOUND),
        (400, ErrorKind.BAD_REQUEST),
    ],
)
def test_mapped_statuses(sync_api, status, kind):
    client, _ = sync_api(status, {})

    with pytest.raises(CFCoreError) as exc_info:
        client.get_mod(7)

    err = exc_info.value
    assert err.kind is kind
    assert err.status_code == status
    assert isinstance(err.cause, requests.HTTPError)
    assert err.__cause__ is err.cause


@pytest.mark.parametrize("status", [301, 401, 403, 429])
def test_unmapped_statuses_propagate(sync_api, status):
    client, _ = sync_api(status, {})
    with pytest.raises(requests.HTTPError) as exc_info:
        client.get_games()
    assert not isinstance(exc_info.value, CFCoreError)
    assert exc_info.value.response.status_code == status


def test_redirects_are_not_followed(sync_api, game_payload):
    client, session = sync_api(200, {"data": game_payload})
    client.get_game(42)
    assert sent(session)[2]["allow_redirects"] is False


class RedirectingAdapter(BaseAdapter):
    """Answers every request with a 301 pointing at another host."""

    def __init__(self, location):
        super().__init__()
        self.location = location
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append(request)
        resp = requests.Response()
        resp.status_code = 301
        resp.headers["Location"] = self.location
        resp._content = b""
        resp._content_consumed = True
        resp.encoding = "utf-8"
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass


def test_redirect_to_other_host_raises_without_sending_key():
    adapter = RedirectingAdapter("http://other.example.test/v1/games/42")
    session = requests.Session()
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    client = CFCoreClient(api_key="secret-key", session=session)

    with pytest.raises(requests.HTTPError) as exc_info:
        client.get_game(42)

    assert exc_info.value.response.status_code == 301
    assert [r.url for r in adapter.sent] == ["https://api.curseforge.com/v1/games/42"]
    session.close()


def test_connection_error_propagates(sync_api):
    failure = requests.ConnectionError("Connection refused")
    client, session = sync_api(body=failure)
    with pytest.raises(requests.ConnectionError) as exc_info:
        client.get_game(42)
    assert exc_info.value is failure
    assert session.request.call_count == 1


def test_set_api_key_applies_to_next_request(sync_api, game_payload):
    client, session = sync_api(200, {"data": game_payload})
    client.set_api_key("rotated-key")
    client.get_game(42)
    assert sent(session)[2]["headers"]["x-api-key"] == "rotated-key"


def test_set_base_url(sync_api, game_payload):
    client, session = sync_api(200, {"data": game_payload})
    client.set_base_url("http://localhost:8080/")
    client.get_game(42)
    assert sent(session)[1] == "http://localhost:8080/v1/games/42"
    with pytest.raises(ValueError):
        client.set_base_url("ftp://example.test")


def test_missing_api_key():
    with pytest.raises(CFCoreError) as exc_info:
        CFCoreClient(api_key="   ")
    assert exc_info.value.kind is ErrorKind.CONFIGURATION


def test_injected_session_not_closed(sync_api):
    client, session = sync_api(200, {"data": None})
    with client:
        pass
    session.close.assert_not_called()


def test_owned_session_closed(monkeypatch):
    created = MagicMock(spec=requests.Session)
    monkeypatch.setattr("cfcore.client.requests.Session", lambda: created)
    with CFCoreClient(api_key="k") as client:
        assert client.session is created
    created.close.assert_called_once_with()
