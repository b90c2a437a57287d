from typing import Any, Literal, NotRequired, TypedDict

SortDirection = Literal["asc", "desc"]

# Clause values are passed through untouched, so they are typed loosely.
ClauseValue = Any


class ESPrefixClause(TypedDict):
    """An Elasticsearch prefix clause."""

    prefix: dict[str, ClauseValue]


class ESTermClause(TypedDict):
    """An Elasticsearch term clause."""

    term: dict[str, ClauseValue]


class ESWildcardClause(TypedDict):
    """An Elasticsearch wildcard clause, value wrapped as `*value*`."""

    wildcard: dict[str, str]


class ESMatchClause(TypedDict):
    """An Elasticsearch match clause."""

    match: dict[str, ClauseValue]


class ESNestedShouldQuery(TypedDict):
    """Inner bool of a nested should clause."""

    should: list[ESMatchClause]


class ESNestedShouldClause(TypedDict):
    """Bool container for an `or` relationship between match clauses inside `must`."""

    bool: ESNestedShouldQuery


ESClause = (
    ESPrefixClause
    | ESTermClause
    | ESWildcardClause
    | ESMatchClause
    | ESNestedShouldClause
)


class ESBooleanQuery(TypedDict):
    """An Elasticsearch boolean query."""

    should: list[ESClause]
    must: list[ESClause]
    minimum_should_match: NotRequired[int]


class ESQueryContext(TypedDict):
    """An Elasticsearch query context."""

    bool: ESBooleanQuery


class ESSortOrder(TypedDict):
    """Direction descriptor of a sort criterion."""

    order: SortDirection


ESSortCriterion = dict[str, ESSortOrder]


# `from` is a keyword, so the functional syntax is required here.
QueryObject = TypedDict(
    "QueryObject",
    {
        "query": ESQueryContext,
        "sort": list[ESSortCriterion],
        "size": NotRequired[int],
        "from": NotRequired[int],
    },
)


class MatchTerm(TypedDict):
    """A key/value pair turned into one match clause of a nested should."""

    key: str
    value: ClauseValue
