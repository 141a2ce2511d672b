"""Shared fixtures: a recording fake of the postcode.tech API."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio

from postcode_nl import HttpClient, PostcodeClient

TOKEN = "test-token"

SIMPLE_BODY: dict[str, Any] = {
    "street": "Nieuwezijds Voorburgwal",
    "city": "Amsterdam",
}

FULL_BODY: dict[str, Any] = {
    "postcode": "1012RJ",
    "number": 147,
    "street": "Nieuwezijds Voorburgwal",
    "city": "Amsterdam",
    "municipality": "Amsterdam",
    "province": "Noord-Holland",
    "geo": {"lat": 52.37316, "lon": 4.89094},
}

LIMIT_HEADERS: dict[str, str] = {
    "X-RateLimit-Limit": "600",
    "X-RateLimit-Remaining": "598",
    "X-Api-Limit": "10000",
    "X-Api-Remaining": "9876",
    "X-Api-Reset": "daily",
}


class FakeApi:
    """Answers every request with the configured response and records it."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.json: Any = SIMPLE_BODY
        self.content: bytes | None = None
        self.headers: dict[str, str] = dict(LIMIT_HEADERS)
        self.error: Callable[[httpx.Request], Exception] | None = None

    def respond(
        self,
        status: int,
        *,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status = status
        self.json = json
        self.content = content
        if headers is not None:
            self.headers = headers

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        if self.content is not None:
            return httpx.Response(self.status, content=self.content, headers=self.headers)
        if self.json is not None:
            return httpx.Response(self.status, json=self.json, headers=self.headers)
        return httpx.Response(self.status, headers=self.headers)


@pytest.fixture()
def api() -> FakeApi:
    return FakeApi()


@pytest_asyncio.fixture()
async def http(api: FakeApi):
    h = HttpClient(transport=httpx.MockTransport(api.handle))
    yield h
    await h.aclose()


@pytest.fixture()
def client(http: HttpClient) -> PostcodeClient:
    return PostcodeClient(TOKEN, http=http)
