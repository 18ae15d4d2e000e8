from __future__ import annotations

import json

from esrest.transport.base import TransportResponse


class FakeTransport:
    """Records every send() and answers from a fixed queue of responses."""

    def __init__(self, *responses: TransportResponse | Exception) -> None:
        self.responses = list(responses)
        self.calls: list[dict] = []

    async def send(self, method, url, content=None, headers=None):
        self.calls.append({"method": method, "url": url, "content": content, "headers": headers})
        r = self.responses.pop(0)
        if isinstance(r, Exception):
            raise r
        return r


def json_response(status_code: int, body) -> TransportResponse:
    return TransportResponse(status_code=status_code, content=json.dumps(body).encode("utf-8"))
