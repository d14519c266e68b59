import pytest

from linksync.providers import factory
from linksync.providers.factory import create_client
from linksync.providers.shortio import ShortioClient
from tests.fakes.client import FakeLinkClient


class _KeyedFakeClient(FakeLinkClient):
    def __init__(self, *, api_key: str, base_url: str) -> None:
        super().__init__()
        self.api_key = api_key
        self.base_url = base_url


def test_create_client_for_shortio() -> None:
    client = create_client("shortio", api_key="key", base_url="https://links.test/api")

    assert isinstance(client, ShortioClient)


def test_create_client_uses_any_registered_link_client(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(factory.CLIENTS, "memory", _KeyedFakeClient)

    client = create_client("memory", api_key="key", base_url="https://links.test/api")

    assert isinstance(client, _KeyedFakeClient)
    assert (client.api_key, client.base_url) == ("key", "https://links.test/api")


def test_create_client_raises_for_unknown_provider() -> None:
    with pytest.raises(ValueError, match="Unknown provider: 'bitly'. Available: shortio"):
        create_client("bitly", api_key="key")
