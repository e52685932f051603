import json

import pytest

from camara_client import CamaraAPIClient, TransportResponse

API_BASE = "https://dadosabertos.camara.leg.br/api/v2"


NO_NEXT = object()


def envelope(dados, next_href=NO_NEXT, self_href=None):
    """Build a response body in the service's {dados, links} format."""
    links = [{"rel": "self", "href": self_href or f"{API_BASE}/self"}]
    if next_href is not NO_NEXT:
        links.append({"rel": "next", "href": next_href})
    return {"dados": dados, "links": links}


class FakeTransport:
    """In-memory transport: maps exact URLs to (status, body) and records every call."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def add(self, url, body, status=200):
        self.routes[url] = (status, body)

    async def get(self, url):
        self.calls.append(url)
        status, body = self.routes[url]
        text = body if isinstance(body, str) else json.dumps(body)
        return TransportResponse(status_code=status, text=text, url=url)


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def fake_client(fake_transport):
    return CamaraAPIClient(transport=fake_transport)


@pytest.fixture
def client():
    c = CamaraAPIClient(min_interval=0.0, max_tries=2, backoff_base=0.0)
    yield c
    c.close()
