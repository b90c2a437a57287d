import copy
from collections.abc import Iterable
from typing import Self, override

import orjson
from loguru import logger as log

from esquery.config.general import CONFIG
from esquery.types.query import (
    ClauseValue,
    ESBooleanQuery,
    ESClause,
    ESNestedShouldClause,
    ESQueryContext,
    MatchTerm,
    QueryObject,
    SortDirection,
)


def empty_query() -> QueryObject:
    """Create the starting document of a fresh builder."""
    return QueryObject(
        query=ESQueryContext(bool=ESBooleanQuery(should=[], must=[])),
        sort=[],
    )


def wildcard_value(value: ClauseValue) -> str:
    """Wrap a value in leading and trailing wildcards.

    Values that already contain `*` are wrapped again: `*x*` becomes `**x**`.
    """
    return f"*{value}*"


class QueryBuilder:
    """A builder for an Elasticsearch bool query.

    Every mutator appends to or sets a field of one document and returns the
    builder, so calls can be chained:

        QueryBuilder().of_type("user").must_match("name", "alice").size(5).build()

    Example document:

    {
      "query": {
        "bool": {
          "should": [{ "prefix": { "name": "al" }}],
          "must": [{ "term": { "type": "user" }}],
          "minimum_should_match": 1
        }
      },
      "sort": [{ "date": { "order": "desc" }}],
      "size": 20,
      "from": 0
    }
    """

    # TODO: of_type always targets the `type` attribute; make the attribute
    # name configurable once entity types are modelled.

    def __init__(self, query: QueryObject | None = None) -> None:
        """Create a builder, optionally continuing a predefined document.

        A given document is used by reference and is not validated.
        """
        if query is not None:
            log.trace("Continuing a predefined query document")
        self.query_object: QueryObject = query if query is not None else empty_query()

    @property
    def _bool(self) -> ESBooleanQuery:
        return self.query_object["query"]["bool"]

    def _should(self, clause: ESClause) -> Self:
        self._bool["should"].append(clause)
        return self

    def _must(self, clause: ESClause) -> Self:
        self._bool["must"].append(clause)
        return self

    def build(self) -> QueryObject:
        """Return the live query document, not a copy."""
        return self.query_object

    def snapshot(self) -> QueryObject:
        """Return a deep copy of the document, unaffected by further calls."""
        return copy.deepcopy(self.query_object)

    def should_prefix(self, key: str, value: ClauseValue) -> Self:
        """Add should have prefix query."""
        return self._should({"prefix": {key: value}})

    def should_term(self, key: str, value: ClauseValue) -> Self:
        """Add should have term query."""
        return self._should({"term": {key: value}})

    def should_wildcard(self, key: str, value: ClauseValue) -> Self:
        """Add should have wildcard query, value wrapped as `*value*`."""
        return self._should({"wildcard": {key: wildcard_value(value)}})

    def should_match(self, key: str, value: ClauseValue) -> Self:
        """Add should match query."""
        return self._should({"match": {key: value}})

    def must_prefix(self, key: str, value: ClauseValue) -> Self:
        """Add must have prefix query."""
        return self._must({"prefix": {key: value}})

    def must_term(self, key: str, value: ClauseValue) -> Self:
        """Add must have term query."""
        return self._must({"term": {key: value}})

    def must_wildcard(self, key: str, value: ClauseValue) -> Self:
        """Add must have wildcard query, value wrapped as `*value*`."""
        return self._must({"wildcard": {key: wildcard_value(value)}})

    def must_match(self, key: str, value: ClauseValue) -> Self:
        """Add must match query."""
        return self._must({"match": {key: value}})

    def must_should_match(self, terms: Iterable[MatchTerm]) -> Self:
        """Add one must clause which is satisfied by any of the given matches.

        Exactly one clause is appended to `must` however many terms are given;
        no terms yields a nested bool with an empty `should`.
        """
        nested: ESNestedShouldClause = {
            "bool": {
                "should": [{"match": {term["key"]: term["value"]}} for term in terms]
            }
        }
        return self._must(nested)

    def of_type(self, type_: ClauseValue) -> Self:
        """Only search for results of the given type."""
        return self.must_term("type", type_)

    def minimum_should_match(self, count: int) -> Self:
        """Set the minimum number of should clauses to match, replacing any prior value."""
        self._bool["minimum_should_match"] = count
        return self

    def sort(self, attribute: str, direction: SortDirection | None = None) -> Self:
        """Add a sort criterion, after any already added.

        Direction defaults to the configured default sort direction (`desc`).
        """
        order = (
            direction if direction is not None else CONFIG.query.default_sort_direction
        )
        self.query_object["sort"].append({attribute: {"order": order}})
        return self

    def size(self, size: int | None = None) -> Self:
        """Set result size, 20 unless configured otherwise."""
        self.query_object["size"] = (
            size if size is not None else CONFIG.query.default_size
        )
        return self

    def from_(self, from_: int | None = None) -> Self:
        """Set result offset, 0 unless configured otherwise."""
        self.query_object["from"] = (
            from_ if from_ is not None else CONFIG.query.default_from
        )
        return self

    def to_bytes(self) -> bytes:
        """Serialize the current document as compact JSON bytes."""
        return orjson.dumps(self.query_object)

    def to_string(self) -> str:
        """Serialize the current document as compact JSON text.

        Keys keep insertion order; the result reflects the document at call time.
        """
        serialized = self.to_bytes().decode()
        log.trace(f"Serialized query: {serialized}")
        return serialized

    @override
    def __str__(self) -> str:
        return self.to_string()

    @override
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_string()})"
