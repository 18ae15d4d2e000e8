from __future__ import annotations

import httpx

from esrest.transport.base import TransportResponse


class HttpxTransport:
    """
    Transport over httpx.AsyncClient.

    Without an injected client a short-lived one is opened per request. Pass a
    shared client to reuse connections; its lifetime is then the caller's.
    """

    def __init__(self, timeout_s: float = 30.0, client: httpx.AsyncClient | None = None) -> None:
        self._timeout_s = timeout_s
        self._client = client

    async def send(
        self,
        method: str,
        url: str,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse:
        if self._client is not None:
            r = await self._client.request(method, url, content=content, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self._timeout_s) as client:
                r = await client.request(method, url, content=content, headers=headers)
        return TransportResponse(status_code=r.status_code, content=r.content)
