from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class Request:
    method: HttpMethod
    path: str  # relative to the host, no leading slash
    body: Any = None  # structured value, or pre-encoded str / bytes


@dataclass(frozen=True)
class Response:
    status_code: int
    body: Any


class IndexTarget(BaseModel):
    """
    Index/type selector shared by the search, mapping and bulk operations.

    index: index name, defaults to "_all" (every index).
    type: document type, defaults to "" (no type segment in the path).
    """

    model_config = ConfigDict(frozen=True)

    index: str = "_all"
    type: str = ""

    def search_path(self) -> str:
        return f"{self.index}/_search"

    def mapping_path(self) -> str:
        if self.type:
            return f"{self.index}/_mapping/{self.type}"
        return f"{self.index}/_mapping"

    def bulk_path(self) -> str:
        if self.type:
            return f"{self.index}/{self.type}/_bulk"
        return f"{self.index}/_bulk"


class BulkSummary(BaseModel):
    errors: bool = False
    items: int = 0
    took: int | None = None

    @classmethod
    def from_response(cls, data: dict) -> BulkSummary:
        return cls(
            errors=bool(data.get("errors", False)),
            items=len(data.get("items") or []),
            took=data.get("took"),
        )
