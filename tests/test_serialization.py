import json

import orjson
import pytest

from esquery import QueryBuilder


def test_empty_builder_string(builder: QueryBuilder) -> None:
    assert builder.to_string() == '{"query":{"bool":{"should":[],"must":[]}},"sort":[]}'
    assert str(builder) == builder.to_string()


def test_string_reflects_live_state(builder: QueryBuilder) -> None:
    before = builder.to_string()
    builder.must_term("a", "1")
    after = builder.to_string()

    assert before != after
    assert after == (
        '{"query":{"bool":{"should":[],"must":[{"term":{"a":"1"}}]}},"sort":[]}'
    )


def test_keys_keep_insertion_order(builder: QueryBuilder) -> None:
    builder.from_(10).size(5).minimum_should_match(1).sort("date", "asc")

    assert builder.to_string() == (
        '{"query":{"bool":{"should":[],"must":[],"minimum_should_match":1}},'
        '"sort":[{"date":{"order":"asc"}}],"from":10,"size":5}'
    )


def test_full_document_round_trips(builder: QueryBuilder) -> None:
    (
        builder.of_type("user")
        .should_prefix("name", "al")
        .must_should_match([{"key": "city", "value": "Zürich"}])
        .minimum_should_match(1)
        .sort("date")
        .size(5)
        .from_(10)
    )

    assert json.loads(builder.to_string()) == builder.build()
    assert orjson.loads(builder.to_bytes()) == builder.build()


def test_non_ascii_is_not_escaped(builder: QueryBuilder) -> None:
    builder.must_match("city", "Zürich")

    assert '"Zürich"' in builder.to_string()
    assert builder.to_bytes() == builder.to_string().encode()


def test_repr(builder: QueryBuilder) -> None:
    assert repr(builder) == f"QueryBuilder({builder.to_string()})"


def test_unserializable_values_raise(builder: QueryBuilder) -> None:
    builder.must_term("a", object())

    with pytest.raises(TypeError):
        builder.to_string()


def test_serialization_is_logged(
    builder: QueryBuilder, log_messages: list[str]
) -> None:
    serialized = builder.to_string()

    assert f"Serialized query: {serialized}" in log_messages


def test_predefined_document_is_logged(log_messages: list[str]) -> None:
    QueryBuilder({"query": {"bool": {"should": [], "must": []}}, "sort": []})

    assert "Continuing a predefined query document" in log_messages
