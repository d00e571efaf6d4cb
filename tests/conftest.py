"""Shared fixtures: stub ScrapingDog transports and a recording client."""

import json

import httpx
import pytest

from core.dispatcher import Dispatcher
from core.models import RawResult
from core.scrapingdog import ScrapingDogClient

BASE_URL = "https://scrapingdog.test"


class RecordingClient:
    """Stands in for ScrapingDogClient and remembers every call it gets."""

    def __init__(self, body='{"ok": true}'):
        self.body = body
        self.calls = []

    async def get(self, endpoint, params):
        self.calls.append((endpoint, dict(params)))
        return RawResult(body=self.body)


def json_transport(payload, status_code=200, seen=None):
    """A MockTransport answering every request with ``payload`` as JSON."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, content=json.dumps(payload).encode(),
                              headers={"content-type": "application/json"})

    return httpx.MockTransport(handler)


@pytest.fixture
def recording_client():
    return RecordingClient()


@pytest.fixture
def dispatcher(recording_client):
    return Dispatcher(client=recording_client)


@pytest.fixture
def make_client():
    def _make(transport):
        return ScrapingDogClient(base_url=BASE_URL, transport=transport)
    return _make
