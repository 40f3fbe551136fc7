"""
URL Resolver

Maps a query filter or a search phrase to the single GitHub resource URL to fetch.
"""

import logging
from typing import Optional

from github_profiles.coreutils.env import api_base_url
from github_profiles.models import Filter

logger = logging.getLogger(__name__)

# API Endpoints
USERS_ENDPOINT_TEMPLATE = "{base_url}/users"
USER_ENDPOINT_TEMPLATE = "{base_url}/users/{key}"

# Column names that address the remote login
IDENTITY_ALIASES = ("ExternalId", "login")


def collection_url(base_url: Optional[str] = None) -> str:
    return USERS_ENDPOINT_TEMPLATE.format(base_url=base_url or api_base_url())


def resource_url(key: str, base_url: Optional[str] = None) -> str:
    return USER_ENDPOINT_TEMPLATE.format(base_url=base_url or api_base_url(), key=key)


def resolve_query_url(
    query_filter: Optional[Filter], base_url: Optional[str] = None
) -> str:
    """
    Resolve the URL for a query

    Leaf predicates are inspected in tree order and the last one naming an
    identity alias wins. Without such a predicate the whole collection is listed.

    Args:
        query_filter: Filter tree of the query, or None
        base_url: API root (defaults to GITHUB_API_BASE_URL)

    Returns:
        str: Resource URL to fetch
    """
    matched = None

    if query_filter is not None:
        for leaf in query_filter.leaves():
            if leaf.column_name in IDENTITY_ALIASES:
                matched = leaf

    if matched is None:
        url = collection_url(base_url)
    else:
        # A leaf without a value still wins; it addresses an empty login
        login = "" if matched.column_value is None else str(matched.column_value)
        url = resource_url(login, base_url)

    logger.debug(f"Resolved query URL: {url}")
    return url


def resolve_search_url(phrase: str, base_url: Optional[str] = None) -> str:
    """Search is a lookup of the phrase as a login; the phrase is passed verbatim"""
    return resource_url(phrase, base_url)
