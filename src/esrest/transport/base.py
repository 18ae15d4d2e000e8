from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    content: bytes


class Transport(Protocol):
    """Sends one HTTP request and returns the status and the full body."""

    async def send(
        self,
        method: str,
        url: str,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> TransportResponse: ...
