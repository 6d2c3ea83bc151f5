import pytest

from cfcore import (
    AsyncCFCoreClient,
    CFCoreClient,
    CFCoreError,
    CFCoreSettings,
    ErrorKind,
    create_async_client,
    create_client,
)


@pytest.fixture
def env(monkeypatch):
    for name in ("CURSEFORGE_API_KEY", "CURSEFORGE_BASE_URL", "CURSEFORGE_TIMEOUT", "CURSEFORGE_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_from_environment(env):
    env.setenv("CURSEFORGE_API_KEY", "env-key")
    env.setenv("CURSEFORGE_BASE_URL", "https://proxy.example.test/")
    env.setenv("CURSEFORGE_TIMEOUT", "3.5")

    settings = CFCoreSettings(_env_file=None)

    assert settings.api_key == "env-key"
    assert settings.base_url == "https://proxy.example.test"
    assert settings.timeout == 3.5


def test_create_client_uses_environment(env):
    env.setenv("CURSEFORGE_API_KEY", "env-key")
    client = create_client(settings=CFCoreSettings(_env_file=None))
    assert isinstance(client, CFCoreClient)
    assert client.api_key == "env-key"
    assert client.base_url == "https://api.curseforge.com"
    client.close()


def test_explicit_arguments_win(env):
    env.setenv("CURSEFORGE_API_KEY", "env-key")
    env.setenv("CURSEFORGE_BASE_URL", "https://proxy.example.test")
    client = create_client("arg-key", base_url="http://localhost:9000", settings=CFCoreSettings(_env_file=None), timeout=2)
    assert client.api_key == "arg-key"
    assert client.base_url == "http://localhost:9000"
    assert client.timeout == 2.0
    client.close()


def test_missing_key_everywhere(env):
    with pytest.raises(CFCoreError) as exc_info:
        create_client(settings=CFCoreSettings(_env_file=None))
    assert exc_info.value.kind is ErrorKind.CONFIGURATION


@pytest.mark.asyncio
async def test_create_async_client(env):
    env.setenv("CURSEFORGE_USER_AGENT", "my-launcher/1.0")
    client = create_async_client("k", settings=CFCoreSettings(_env_file=None))
    assert isinstance(client, AsyncCFCoreClient)
    assert client.user_agent == "my-launcher/1.0"
    assert client._make_headers()["User-Agent"] == "my-launcher/1.0"
    await client.aclose()
