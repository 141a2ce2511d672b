from __future__ import annotations

import logging
from typing import Any

import httpx

from postcode_nl.core.errors import TransportFailure

log = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "postcode-nl/0.1.0"


class HttpClient:
    """
    Thin async wrapper around httpx.AsyncClient.

    timeout_seconds=None disables client-side timeouts; callers that want a
    deadline wrap the awaited lookup themselves. The underlying connection
    pool is safe to share between concurrent tasks.
    """

    def __init__(
        self,
        *,
        timeout_seconds: float | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            timeout=timeout_seconds,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

    async def get(self, url: str, *, params: dict[str, Any], headers: dict[str, str]) -> httpx.Response:
        """
        Send one GET request and return the response whatever its status.

        Raises TransportFailure when no response was received.
        """
        try:
            return await self._client.get(url, params=params, headers=headers)
        except httpx.TransportError as e:
            log.warning("HTTP transport error: %s", e)
            raise TransportFailure(str(e) or type(e).__name__) from e

    async def aclose(self) -> None:
        await self._client.aclose()
