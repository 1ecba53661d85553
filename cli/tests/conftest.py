from __future__ import annotations

import json
import time
from typing import Callable

import httpx
import pytest

from superapp_client import SuperAppClient
from superapp_client.config_types import ClientConfig
from superapp_client.retry import NO_DELAY

BASE_URL = "http://host.test:8080/v1/super"


class FakeHost:
    """Records requests and answers them with a scripted handler."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def sdk_client() -> Callable[..., tuple[SuperAppClient, FakeHost]]:
    clients: list[SuperAppClient] = []

    def _make(handler, *, delay=NO_DELAY, **cfg_kwargs) -> tuple[SuperAppClient, FakeHost]:
        host = FakeHost(handler)
        client = SuperAppClient(
            ClientConfig(base_url=BASE_URL, api_key="key-123", **cfg_kwargs),
            transport=httpx.MockTransport(host),
            delay=delay,
        )
        clients.append(client)
        return client, host

    yield _make
    for client in clients:
        client.close()


class DripStream(httpx.SyncByteStream):
    """Response body that arrives one chunk at a time."""

    def __init__(self, chunks: list[bytes], interval_s: float):
        self._chunks = chunks
        self._interval_s = interval_s

    def __iter__(self):
        for chunk in self._chunks:
            time.sleep(self._interval_s)
            yield chunk
