"""Failure taxonomy and classification of engine error responses."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Classified failure variants."""

    INDEX_MISSING = "index_missing"
    INDEX_ALREADY_EXISTS = "index_already_exists"
    GENERIC = "generic"


_MISSING: Any = object()


class ElasticSearchError(Exception):
    """
    Base failure raised by the client. Also the Generic variant.

    `response` is the decoded error body (or whatever partial information was
    available when no body could be decoded).
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        response: Any = _MISSING,
        status_code: int | None = None,
        message: str | None = None,
    ) -> None:
        # A decoded JSON null is kept as None; {} only when no body was given.
        self.response = {} if response is _MISSING else response
        self.status_code = status_code
        super().__init__(message or _describe(self.response, status_code))

    def __str__(self) -> str:
        return f"{self.kind.value}: {super().__str__()}"


class IndexMissingError(ElasticSearchError):
    kind = ErrorKind.INDEX_MISSING


class IndexAlreadyExistsError(ElasticSearchError):
    """Index creation conflict. `index` is attached by the caller that knows it."""

    kind = ErrorKind.INDEX_ALREADY_EXISTS

    def __init__(
        self,
        response: Any = _MISSING,
        status_code: int | None = None,
        message: str | None = None,
        index: str | None = None,
    ) -> None:
        self.index = index
        if message is None and index is not None:
            message = f"index already exists: {index}"
        super().__init__(response, status_code, message)


class SerializationError(ElasticSearchError):
    """A body could not be encoded to, or decoded from, JSON."""


class ElasticConnectionError(ElasticSearchError):
    """The transport failed before a response was received."""


# Normalized error codes reported under error.type by current engines.
_ERROR_TYPES: dict[str, type[ElasticSearchError]] = {
    "index_not_found_exception": IndexMissingError,
    "index_already_exists_exception": IndexAlreadyExistsError,
    "resource_already_exists_exception": IndexAlreadyExistsError,
}

# Older engines only report a message string. Matching on its prefix is
# fragile: any change to the engine's message text turns these into Generic.
_ERROR_PREFIXES: tuple[tuple[str, type[ElasticSearchError]], ...] = (
    ("IndexMissingException", IndexMissingError),
    ("IndexAlreadyExistsException", IndexAlreadyExistsError),
)


def classify(body: Any, status_code: int | None = None) -> ElasticSearchError:
    """
    Map a decoded error body onto a failure variant. Pure, no I/O.

    Dispatches on the structured `error.type` code when present and falls
    back to prefix matching on a plain `error` string. Everything else is
    Generic. The body is carried through unchanged.
    """
    error = body.get("error") if isinstance(body, dict) else None

    if isinstance(error, dict) and isinstance(error.get("type"), str):
        cls = _ERROR_TYPES.get(error["type"], ElasticSearchError)
        return cls(body, status_code)

    if isinstance(error, str):
        for prefix, cls in _ERROR_PREFIXES:
            if error.startswith(prefix):
                return cls(body, status_code)

    return ElasticSearchError(body, status_code)


def _describe(response: Any, status_code: int | None) -> str:
    error = response.get("error") if isinstance(response, dict) else None
    if isinstance(error, dict):
        error = error.get("reason") or error.get("type")
    text = str(error) if error else "request failed"
    if status_code is not None:
        return f"HTTP {status_code}: {text}"
    return text
