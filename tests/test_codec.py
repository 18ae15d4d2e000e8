import json
import math

import pytest

from esrest.codec.bulk import encode_bulk, index_actions
from esrest.codec.json_codec import decode, encode
from esrest.errors import ErrorKind, SerializationError


def test_encode_is_compact_single_line() -> None:
    text = encode({"name": "Fury", "tags": ["war", "drama"], "note": "line1\nline2"})
    assert text == '{"name":"Fury","tags":["war","drama"],"note":"line1\\nline2"}'
    assert "\n" not in text


def test_encode_keeps_non_ascii() -> None:
    assert encode({"city": "Zürich"}) == '{"city":"Zürich"}'


def test_encode_then_decode_is_structurally_equal() -> None:
    value = {"a": None, "b": True, "c": 1.5, "d": [1, "x", {"e": []}], "f": "ü"}
    assert decode(encode(value).encode("utf-8")) == value


def test_encode_rejects_unserializable() -> None:
    with pytest.raises(SerializationError) as exc_info:
        encode({"when": object()})
    assert exc_info.value.kind == ErrorKind.GENERIC


def test_decode_malformed_json_carries_raw_text() -> None:
    with pytest.raises(SerializationError) as exc_info:
        decode(b"<html>bad gateway</html>")
    assert exc_info.value.response == {"raw": "<html>bad gateway</html>"}


def test_decode_invalid_utf8() -> None:
    with pytest.raises(SerializationError):
        decode(b"\xff\xfe{}")


def test_encode_bulk_one_line_per_value_with_trailing_newline() -> None:
    ops = [
        {"index": {"_index": "movie-index", "_id": "1"}},
        {"name": "Fury", "year": "2014"},
        {"delete": {"_index": "movie-index", "_id": "2"}},
        {"create": {"_index": "movie-index", "_id": "3"}},
        {"name": "Annabelle", "plot": "a\nb"},
    ]
    payload = encode_bulk(ops)

    assert payload.endswith("\n")
    lines = payload[:-1].split("\n")
    assert len(lines) == len(ops)
    assert [json.loads(line) for line in lines] == ops


def test_encode_bulk_preserves_order_and_duplicates() -> None:
    ops = [{"delete": {"_id": "2"}}, {"delete": {"_id": "1"}}, {"delete": {"_id": "2"}}]
    assert encode_bulk(ops) == (
        '{"delete":{"_id":"2"}}\n{"delete":{"_id":"1"}}\n{"delete":{"_id":"2"}}\n'
    )


def test_encode_bulk_does_not_validate_pairs() -> None:
    ops = [{"name": "orphan document"}, {"name": "another"}]
    assert encode_bulk(ops) == '{"name":"orphan document"}\n{"name":"another"}\n'


def test_encode_bulk_empty() -> None:
    assert encode_bulk([]) == "\n"


def test_index_actions_builds_pairs_without_mutating_input() -> None:
    docs = [{"id": "c1", "text": "hello"}, {"id": "c2", "text": "world"}]

    ops = index_actions("chunks", docs)

    assert ops == [
        {"index": {"_index": "chunks", "_id": "c1"}},
        {"text": "hello"},
        {"index": {"_index": "chunks", "_id": "c2"}},
        {"text": "world"},
    ]
    assert docs[0] == {"id": "c1", "text": "hello"}


def test_index_actions_custom_id_field() -> None:
    ops = index_actions("chunks", [{"chunk_id": "c1", "text": "x"}], id_field="chunk_id")
    assert ops[0] == {"index": {"_index": "chunks", "_id": "c1"}}
    assert ops[1] == {"text": "x"}


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_encode_rejects_non_finite_floats(value) -> None:
    with pytest.raises(SerializationError):
        encode({"score": value})


def test_encode_bulk_rejects_nan_document() -> None:
    with pytest.raises(SerializationError):
        encode_bulk([{"index": {"_id": "1"}}, {"score": math.nan}])
