from __future__ import annotations

from typing import Any

import httpx
import structlog

from esrest.codec.json_codec import decode, encode
from esrest.errors import ElasticConnectionError, SerializationError, classify
from esrest.models import HttpMethod, Request, Response
from esrest.settings import settings
from esrest.transport.base import Transport
from esrest.transport.httpx_transport import HttpxTransport

logger = structlog.get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


class RequestExecutor:
    """
    Runs one request per call: serialize, send, decode, classify.

    Holds nothing but the host and the transport, so concurrent calls are
    independent. No retries; timeouts are the transport's concern.
    """

    def __init__(self, host: str, transport: Transport | None = None) -> None:
        self._host = host
        self._transport = transport or HttpxTransport(timeout_s=settings.es_timeout_s)

    @property
    def host(self) -> str:
        return self._host

    async def execute(
        self,
        method: HttpMethod | str,
        path: str,
        body: Any = None,
        *,
        content_type: str | None = None,
    ) -> Any:
        """
        Return the decoded response body, or raise a classified
        ElasticSearchError when the status is >= 400.
        """
        response = await self.send(Request(HttpMethod(method), path, body), content_type=content_type)
        return response.body

    async def send(self, request: Request, *, content_type: str | None = None) -> Response:
        url = f"{self._host}/{request.path}"
        method = request.method.value

        content: bytes | None = None
        headers: dict[str, str] | None = None
        if request.body is not None:
            content = _to_bytes(request.body)
            headers = {"Content-Type": content_type or JSON_CONTENT_TYPE}

        logger.debug("es.request", method=method, url=url, body_bytes=len(content or b""))
        try:
            raw = await self._transport.send(method, url, content=content, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL, OSError, OverflowError, ValueError) as e:
            logger.warning("es.error", method=method, url=url, kind="connection", error=str(e))
            raise ElasticConnectionError(
                {"error": str(e)}, message=f"{method} {url} failed: {e}"
            ) from e

        logger.debug("es.response", method=method, url=url, status=raw.status_code)
        try:
            decoded = decode(raw.content)
        except SerializationError as e:
            e.status_code = raw.status_code
            logger.warning("es.error", method=method, url=url, status=raw.status_code, kind=e.kind.value)
            raise

        if raw.status_code >= 400:
            error = classify(decoded, raw.status_code)
            logger.warning("es.error", method=method, url=url, status=raw.status_code, kind=error.kind.value)
            raise error

        return Response(status_code=raw.status_code, body=decoded)


def _to_bytes(body: Any) -> bytes:
    # Pre-encoded payloads (bulk NDJSON) go out untouched.
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    return encode(body).encode("utf-8")
