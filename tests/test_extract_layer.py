"""
Test Extract Layer - URL resolution and single-attempt fetching
"""

import logging
from unittest.mock import Mock, patch

import pytest
import requests

from github_profiles.extract.github_api import GitHubAPIClient, fetch_body
from github_profiles.extract.urls import (
    IDENTITY_ALIASES,
    collection_url,
    resolve_query_url,
    resolve_search_url,
)
from github_profiles.models import Filter

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

BASE_URL = "https://api.example.test"


def test_no_filter_lists_all_users():
    assert resolve_query_url(None, BASE_URL) == f"{BASE_URL}/users"


def test_filter_without_identity_predicate_lists_all_users():
    query_filter = Filter(
        sub_filters=[
            Filter(column_name="company", column_value="GitHub"),
            Filter(column_name="bio", column_value="hello"),
        ]
    )

    assert resolve_query_url(query_filter, BASE_URL) == collection_url(BASE_URL)


@pytest.mark.parametrize("column_name", IDENTITY_ALIASES)
def test_single_identity_predicate_targets_user(column_name):
    query_filter = Filter(column_name=column_name, column_value="octocat")

    assert resolve_query_url(query_filter, BASE_URL) == f"{BASE_URL}/users/octocat"


def test_last_identity_predicate_wins():
    query_filter = Filter(
        sub_filters=[
            Filter(column_name="ExternalId", column_value="first"),
            Filter(column_name="name", column_value="ignored"),
            Filter(column_name="login", column_value="second"),
        ]
    )

    assert resolve_query_url(query_filter, BASE_URL) == f"{BASE_URL}/users/second"


def test_nested_predicates_are_walked_in_order():
    query_filter = Filter(
        sub_filters=[
            Filter(
                sub_filters=[
                    Filter(column_name="login", column_value="inner"),
                    Filter(column_name="company", column_value="x"),
                ]
            ),
            Filter(column_name="ExternalId", column_value="outer"),
        ]
    )

    assert [leaf.column_value for leaf in query_filter.leaves()] == [
        "inner",
        "x",
        "outer",
    ]
    assert resolve_query_url(query_filter, BASE_URL) == f"{BASE_URL}/users/outer"


def test_search_phrase_is_passed_verbatim():
    assert resolve_search_url("octo", BASE_URL) == f"{BASE_URL}/users/octo"
    assert resolve_search_url("a b?c", BASE_URL) == f"{BASE_URL}/users/a b?c"


def test_base_url_comes_from_environment():
    with patch.dict("os.environ", {"GITHUB_API_BASE_URL": "https://ghe.local/api/v3/"}):
        assert resolve_search_url("octo") == "https://ghe.local/api/v3/users/octo"


def _mock_session(text="{}", error=None):
    response = Mock(text=text)
    if error is not None:
        response.raise_for_status.side_effect = error
    session = Mock()
    session.get.return_value = response
    return session


def test_client_fetch_returns_body_and_closes_session():
    session = _mock_session(text='{"login": "octocat"}')

    with patch(
        "github_profiles.extract.github_api.new_session", return_value=session
    ) as mock_new_session:
        client = GitHubAPIClient(token="t0k3n", timeout=5)
        body = client.fetch(f"{BASE_URL}/users/octocat")

    assert body == '{"login": "octocat"}'
    mock_new_session.assert_called_once_with(token="t0k3n")
    session.get.assert_called_once_with(f"{BASE_URL}/users/octocat", timeout=5)
    session.close.assert_called_once()


def test_client_propagates_http_errors_without_retry():
    session = _mock_session(error=requests.HTTPError("404 Client Error"))

    with patch("github_profiles.extract.github_api.new_session", return_value=session):
        client = GitHubAPIClient(token="", timeout=5)
        with pytest.raises(requests.HTTPError):
            client(f"{BASE_URL}/users/ghost")

    assert session.get.call_count == 1
    session.close.assert_called_once()


def test_client_propagates_connection_errors():
    session = Mock()
    session.get.side_effect = requests.ConnectionError("DNS failure")

    with patch("github_profiles.extract.github_api.new_session", return_value=session):
        with pytest.raises(requests.ConnectionError):
            GitHubAPIClient(token="", timeout=5).fetch(f"{BASE_URL}/users")

    session.close.assert_called_once()


def test_fetch_body_uses_environment_settings():
    session = _mock_session(text="[]")
    env = {"GITHUB_TOKEN": "env-token", "GITHUB_REQUEST_TIMEOUT": "12"}

    with patch.dict("os.environ", env), patch(
        "github_profiles.extract.github_api.new_session", return_value=session
    ) as mock_new_session:
        assert fetch_body(f"{BASE_URL}/users") == "[]"

    mock_new_session.assert_called_once_with(token="env-token")
    session.get.assert_called_once_with(f"{BASE_URL}/users", timeout=12.0)


def test_valueless_identity_predicate_still_wins():
    query_filter = Filter(
        sub_filters=[
            Filter(column_name="login", column_value="octocat"),
            Filter(column_name="ExternalId"),
        ]
    )

    assert resolve_query_url(query_filter, BASE_URL) == f"{BASE_URL}/users/"


def test_valueless_identity_predicate_is_overridden_by_later_match():
    query_filter = Filter(
        sub_filters=[
            Filter(column_name="login", column_value=None),
            Filter(column_name="ExternalId", column_value="hubot"),
        ]
    )

    assert resolve_query_url(query_filter, BASE_URL) == f"{BASE_URL}/users/hubot"
