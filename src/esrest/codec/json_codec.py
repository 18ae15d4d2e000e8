from __future__ import annotations

import json
from typing import Any

from esrest.errors import SerializationError


def encode(value: Any) -> str:
    """
    Compact single-line JSON. Newlines inside strings are escaped by the
    encoder, so the result never spans lines.
    """
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(message=f"cannot encode body: {e}") from e


def decode(data: bytes) -> Any:
    """UTF-8 text parsed as JSON. The whole buffer is decoded at once."""
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SerializationError(
            {"raw": data.decode("utf-8", errors="replace")},
            message=f"response is not valid UTF-8: {e}",
        ) from e

    try:
        return json.loads(text)
    except ValueError as e:
        raise SerializationError({"raw": text}, message=f"response is not valid JSON: {e}") from e
