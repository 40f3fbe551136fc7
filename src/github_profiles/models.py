"""
Request and result models exchanged with the query host
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Mapping, Optional

import polars as pl

# A normalized row: read-only mapping of column name to JSON value
Row = Mapping[str, Any]


@dataclass
class Filter:
    """Node of a filter tree; a node without sub-filters is a leaf predicate"""

    column_name: Optional[str] = None
    column_value: Any = None
    sub_filters: List["Filter"] = field(default_factory=list)

    def leaves(self) -> Iterator["Filter"]:
        """Yield leaf predicates depth first, in declaration order"""
        if not self.sub_filters:
            yield self
            return

        for sub_filter in self.sub_filters:
            yield from sub_filter.leaves()


@dataclass
class QueryRequest:
    table_name: str
    filter: Optional[Filter] = None


@dataclass
class SearchRequest:
    phrase: str
    table_names: List[str] = field(default_factory=list)


@dataclass
class TableResult:
    """Result bundle for one table of a query or search"""

    success: bool
    table_name: str
    rows: List[Row] = field(default_factory=list)
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, table_name: str, rows: List[Row]) -> "TableResult":
        return cls(success=True, table_name=table_name, rows=list(rows))

    @classmethod
    def failed(cls, table_name: str, error_message: str) -> "TableResult":
        return cls(success=False, table_name=table_name, error_message=error_message)

    def to_frame(self) -> pl.DataFrame:
        """Rows as a polars DataFrame with the profile table's columns"""
        from github_profiles.datasources.github.profiles import ProfileListing

        return ProfileListing.of(self.rows).df
