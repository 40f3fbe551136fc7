"""
GitHub API Client - Pure I/O Operations

Performs single GET requests against the GitHub REST API and hands back the raw body.
All interpretation of the body happens in the transformation layer.
"""

import logging
from typing import Optional

from github_profiles.coreutils.env import api_token, request_timeout
from github_profiles.coreutils.request import new_session, get_text

logger = logging.getLogger(__name__)


class GitHubAPIClient:
    """Fetch capability backed by a fresh requests session per call"""

    def __init__(self, token: Optional[str] = None, timeout: Optional[float] = None):
        self.token = token if token is not None else api_token()
        self.timeout = timeout if timeout is not None else request_timeout()

    def fetch(self, url: str) -> str:
        """
        GET a URL once

        Args:
            url: Fully resolved resource URL

        Returns:
            str: Raw response body

        Raises:
            requests.RequestException: On transport failure or non-2xx status
        """
        logger.info(f"Fetching from {url}")
        session = new_session(token=self.token)
        try:
            return get_text(session, url, timeout=self.timeout)
        finally:
            session.close()

    __call__ = fetch


def fetch_body(url: str) -> str:
    """Convenience function to fetch a URL with settings from the environment"""
    return GitHubAPIClient().fetch(url)
