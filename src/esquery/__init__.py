from loguru import logger

from esquery.builder import QueryBuilder
from esquery.types.query import MatchTerm, QueryObject, SortDirection

# Silent unless an application opts in, see esquery.config.logger.
logger.disable("esquery")

__all__ = ["MatchTerm", "QueryBuilder", "QueryObject", "SortDirection"]
