import json
from pathlib import Path

import httpx
import pytest

from gmaps_services import config

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> bytes:
    return (FIXTURES / name).read_bytes()


def load_fixture_json(name: str) -> dict:
    return json.loads(load_fixture(name))


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Pin the values the request builders read at format time."""
    monkeypatch.setattr(config, "LOCATION_SENSOR", False)
    monkeypatch.setattr(config, "DEFAULT_LANGUAGE", "en")
    monkeypatch.setattr(config, "REQUEST_TIMEOUT", 30.0)
    monkeypatch.setattr(config, "PROXY_HOST", "")
    monkeypatch.setattr(config, "PROXY_USER", "")
    monkeypatch.setattr(config, "PROXY_PASS", "")
    for name in ("GMAPS_PROXY_HOST", "GMAPS_PROXY_USER", "GMAPS_PROXY_PASS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_http():
    """Build an httpx client whose requests are answered by a handler."""
    clients = []

    def factory(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()
