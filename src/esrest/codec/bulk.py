from __future__ import annotations

from typing import Any, Iterable

from esrest.codec.json_codec import encode

NDJSON_CONTENT_TYPE = "application/x-ndjson"


def encode_bulk(operations: Iterable[Any]) -> str:
    """
    Encode action descriptors and documents as NDJSON for the _bulk endpoint.

    One compact JSON value per line, input order kept. The engine requires the
    last line to be newline-terminated as well.
    """
    return "\n".join(encode(op) for op in operations) + "\n"


def index_actions(index_name: str, docs: Iterable[dict], id_field: str = "id") -> list[dict]:
    """
    Build an alternating index-action / document sequence.

    Each doc must contain `id_field`; it becomes the action's _id and is left
    out of the emitted document. Input dicts are not modified.
    """
    operations: list[dict] = []
    for d in docs:
        doc = dict(d)
        doc_id = doc.pop(id_field)
        operations.append({"index": {"_index": index_name, "_id": doc_id}})
        operations.append(doc)
    return operations
