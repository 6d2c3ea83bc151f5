"""Client configuration from the environment via pydantic-settings.

Variables (prefix ``CURSEFORGE_``, case-insensitive, ``.env`` supported):
    CURSEFORGE_API_KEY      API key (required unless passed explicitly)
    CURSEFORGE_BASE_URL     API root, default https://api.curseforge.com
    CURSEFORGE_TIMEOUT      per-request timeout in seconds
    CURSEFORGE_USER_AGENT   User-Agent header

Explicit arguments to the factories always win over the environment.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .async_client import AsyncCFCoreClient
from .client import CFCoreClient
from .endpoints import DEFAULT_BASE_URL
from .utils import DEFAULT_USER_AGENT


class CFCoreSettings(BaseSettings):
    """Client settings read from environment variables."""

    model_config = SettingsConfigDict(env_prefix="CURSEFORGE_", env_file=".env", extra="ignore")

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 15.0
    user_agent: str = DEFAULT_USER_AGENT

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def client_kwargs(self, **overrides: Any) -> dict:
        """Constructor arguments, with non-None `overrides` taking precedence."""
        kwargs = {
            "api_key": self.api_key,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "user_agent": self.user_agent,
        }
        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return kwargs


def create_client(
    api_key: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    settings: Optional[CFCoreSettings] = None,
    **kwargs: Any,
) -> CFCoreClient:
    """
    Build a blocking `CFCoreClient` from explicit arguments and the environment.

    Raises `CFCoreError` (kind CONFIGURATION) when no API key is found in
    either place.
    """
    settings = settings or CFCoreSettings()
    return CFCoreClient(**settings.client_kwargs(api_key=api_key, base_url=base_url, **kwargs))


def create_async_client(
    api_key: Optional[str] = None,
    *,
    base_url: Optional[str] = None,
    settings: Optional[CFCoreSettings] = None,
    **kwargs: Any,
) -> AsyncCFCoreClient:
    """Same as `create_client`, for `AsyncCFCoreClient`."""
    settings = settings or CFCoreSettings()
    return AsyncCFCoreClient(**settings.client_kwargs(api_key=api_key, base_url=base_url, **kwargs))
