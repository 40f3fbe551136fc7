"""
Profile Adapter - Host-Facing Boundary

Each call runs its own pipeline:
    resolve URL → fetch body → normalize → enrich → result bundle

The host applies its own filtering, sorting and paging to the returned rows.
"""

import logging
from typing import Callable, FrozenSet, List, Optional

import requests

from github_profiles.errors import ProfileAdapterError
from github_profiles.extract.github_api import GitHubAPIClient
from github_profiles.extract.urls import resolve_query_url, resolve_search_url
from github_profiles.models import QueryRequest, Row, SearchRequest, TableResult
from github_profiles.transformation.schemas import TableSchema, describe_schema
from github_profiles.transformation.transformers import build_rows

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], str]

CAPABILITIES = frozenset({"row_query", "search"})

# Failures reported to the host instead of raised
REPORTABLE_ERRORS = (requests.RequestException, ProfileAdapterError)


class ProfileAdapter:
    """Serves GitHub profile rows to a relational-query host"""

    def __init__(self, fetcher: Optional[Fetcher] = None, base_url: Optional[str] = None):
        """
        Initialize the adapter

        Args:
            fetcher: Callable GETting a URL and returning the body (defaults to
                a GitHubAPIClient configured from the environment)
            base_url: API root (defaults to GITHUB_API_BASE_URL)
        """
        self.fetcher = fetcher if fetcher is not None else GitHubAPIClient()
        self.base_url = base_url

    def capabilities(self) -> FrozenSet[str]:
        return CAPABILITIES

    def sync(self) -> List[TableSchema]:
        """Tables to declare on the host's validate-and-sync action"""
        table = describe_schema()
        logger.info(f"Syncing table {table.name} with {len(table.columns)} columns")
        return [table]

    def query(self, request: QueryRequest) -> TableResult:
        """
        Run a query against one table

        Args:
            request: Target table and optional filter tree

        Returns:
            TableResult: Rows on success, error message on failure
        """
        url = resolve_query_url(request.filter, self.base_url)
        logger.info(f"🔄 Query on {request.table_name}: {url}")

        try:
            rows = self._fetch_rows(url)
        except REPORTABLE_ERRORS as e:
            logger.error(f"❌ Query on {request.table_name} failed: {e}")
            return TableResult.failed(request.table_name, str(e))

        logger.info(f"✅ Query on {request.table_name} returned {len(rows)} rows")
        return TableResult.ok(request.table_name, rows)

    def search(self, request: SearchRequest) -> List[TableResult]:
        """
        Search every requested table, one fetch per table

        The first failure aborts the search: no further fetches are made and
        every requested table is reported with that failure.

        Args:
            request: Search phrase and target tables

        Returns:
            List[TableResult]: One bundle per requested table, in request order
        """
        url = resolve_search_url(request.phrase, self.base_url)
        results = []

        for table_name in request.table_names:
            logger.info(f"🔄 Search on {table_name}: {url}")
            try:
                rows = self._fetch_rows(url)
            except REPORTABLE_ERRORS as e:
                logger.error(f"❌ Search on {table_name} failed: {e}")
                return [
                    TableResult.failed(name, str(e)) for name in request.table_names
                ]

            results.append(TableResult.ok(table_name, rows))

        return results

    def _fetch_rows(self, url: str) -> List[Row]:
        return build_rows(self.fetcher(url))
