"""
exceptions.py

Error type raised by the cfcore clients.

Every library failure is a single ``CFCoreError`` carrying a ``kind``
discriminant, so callers switch on ``err.kind`` instead of walking a class
hierarchy. HTTP failures keep the original transport error as ``cause``
(and as ``__cause__`` when raised with ``raise ... from``).

Transport failures without a mapped status (connection errors, timeouts,
redirects, 401/403/429 ...) are never wrapped: the clients let the
``httpx`` / ``requests`` exception propagate unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    """Discriminant of ``CFCoreError``."""

    CONFIGURATION = "configuration"
    SERVICE_UNAVAILABLE = "service_unavailable"
    INTERNAL_SERVER_ERROR = "internal_server_error"
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"


_DEFAULT_MESSAGES = {
    ErrorKind.CONFIGURATION: "API key is required",
    ErrorKind.SERVICE_UNAVAILABLE: "Service unavailable. Please try again later.",
    ErrorKind.INTERNAL_SERVER_ERROR: "Internal server error. Please try again later.",
    ErrorKind.NOT_FOUND: "Not found.",
    ErrorKind.BAD_REQUEST: "Bad request.",
}

_NAMES = {
    ErrorKind.CONFIGURATION: "CFCoreConfigurationError",
    ErrorKind.SERVICE_UNAVAILABLE: "CFCoreServiceUnavailableError",
    ErrorKind.INTERNAL_SERVER_ERROR: "CFCoreInternalServerError",
    ErrorKind.NOT_FOUND: "CFCoreNotFoundError",
    ErrorKind.BAD_REQUEST: "CFCoreBadRequestError",
}


class CFCoreError(Exception):
    """
    Library error, discriminated by ``kind``.

    Attributes
    ----------
    kind : ErrorKind
        What went wrong.
    message : str
        Human readable message; defaults to the standard text for ``kind``.
    cause : Optional[BaseException]
        The original transport error, when there is one.
    status_code : Optional[int]
        HTTP status of the failed response, if any.
    response : Optional[Any]
        Raw transport response (``httpx.Response`` / ``requests.Response``).
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        *,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
        response: Optional[Any] = None,
    ):
        self.kind = ErrorKind(kind)
        self.message = message if message is not None else _DEFAULT_MESSAGES[self.kind]
        self.cause = cause
        self.status_code = status_code
        self.response = response
        super().__init__(self.message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def name(self) -> str:
        """Stable tag for the kind, e.g. ``CFCoreNotFoundError``."""
        return _NAMES[self.kind]

    def __str__(self) -> str:
        base = f"[{self.name}] {self.message}"
        if self.status_code is not None:
            base += f" (status={self.status_code})"
        return base

    def __repr__(self) -> str:
        return f"<CFCoreError kind={self.kind.value!r} status={self.status_code!r} message={self.message!r}>"


def map_http_status(
    status_code: int,
    *,
    cause: Optional[BaseException] = None,
    response: Optional[Any] = None,
    message: Optional[str] = None,
) -> Optional[CFCoreError]:
    """
    Convert an HTTP status code into a ``CFCoreError``.

    Parameters
    ----------
    status_code : int
        HTTP status code returned by the server.
    cause : BaseException, optional
        Transport error to attach as the cause.
    response : Any, optional
        Raw response object to attach.
    message : str, optional
        Overrides the default message of the kind.

    Returns
    -------
    Optional[CFCoreError]
        The mapped error, or None when the status has no mapping and the
        transport error must propagate as-is.
    """
    if status_code == 503:
        kind = ErrorKind.SERVICE_UNAVAILABLE
    elif status_code >= 500:
        kind = ErrorKind.INTERNAL_SERVER_ERROR
    elif status_code == 404:
        kind = ErrorKind.NOT_FOUND
    elif status_code == 400:
        kind = ErrorKind.BAD_REQUEST
    else:
        return None
    return CFCoreError(kind, message, cause=cause, status_code=status_code, response=response)


__all__ = ["ErrorKind", "CFCoreError", "map_http_status"]
