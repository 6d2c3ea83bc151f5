import pytest

from cfcore import CFCoreError, ErrorKind, map_http_status


@pytest.mark.parametrize(
    "status, kind",
    [
        (503, ErrorKind.SERVICE_UNAVAILABLE),
        (500, ErrorKind.INTERNAL_SERVER_ERROR),
        (501, ErrorKind.INTERNAL_SERVER_ERROR),
        (599, ErrorKind.INTERNAL_SERVER_ERROR),
        (404, ErrorKind.NOT_FOUND),
        (400, ErrorKind.BAD_REQUEST),
    ],
)
def test_map_http_status(status, kind):
    cause = RuntimeError("transport")
    err = map_http_status(status, cause=cause)
    assert err.kind is kind
    assert err.status_code == status
    assert err.cause is cause
    assert err.__cause__ is cause


@pytest.mark.parametrize("status", [200, 204, 301, 304, 401, 403, 405, 409, 422, 429])
def test_unmapped_status_returns_none(status):
    assert map_http_status(status) is None


def test_default_messages():
    assert CFCoreError(ErrorKind.CONFIGURATION).message == "API key is required"
    assert CFCoreError(ErrorKind.SERVICE_UNAVAILABLE).message == "Service unavailable. Please try again later."
    assert CFCoreError(ErrorKind.INTERNAL_SERVER_ERROR).message == "Internal server error. Please try again later."
    assert CFCoreError(ErrorKind.NOT_FOUND).message == "Not found."
    assert CFCoreError(ErrorKind.BAD_REQUEST).message == "Bad request."


def test_message_override():
    err = map_http_status(404, message="No such mod")
    assert err.message == "No such mod"
    assert err.kind is ErrorKind.NOT_FOUND


def test_name_and_str():
    err = CFCoreError(ErrorKind.SERVICE_UNAVAILABLE, status_code=503)
    assert err.name == "CFCoreServiceUnavailableError"
    assert str(err) == "[CFCoreServiceUnavailableError] Service unavailable. Please try again later. (status=503)"
    assert str(CFCoreError(ErrorKind.CONFIGURATION)) == "[CFCoreConfigurationError] API key is required"


def test_kind_accepts_string_value():
    assert CFCoreError("not_found").kind is ErrorKind.NOT_FOUND


def test_without_cause():
    err = CFCoreError(ErrorKind.BAD_REQUEST)
    assert err.cause is None
    assert err.__cause__ is None
    assert err.response is None
