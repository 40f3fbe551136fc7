import logging
import time
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger(__name__)

# Single attempt: failures surface straight to the caller
NO_RETRY_STRATEGY = Retry(total=0, raise_on_status=False)

USER_AGENT = "github-profiles-adapter/1.0"


def new_session(token: Optional[str] = None) -> requests.Session:
    """Create a new requests session; the token, if any, is injected here"""
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=NO_RETRY_STRATEGY)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update(
        {"User-Agent": USER_AGENT, "Accept": "application/vnd.github+json"}
    )
    if token:
        session.headers["Authorization"] = f"Bearer {token}"

    return session


def get_text(session: requests.Session, url: str, timeout: float = 30) -> str:
    """Single GET returning the raw response body.

    Args:
        session: HTTP session to use
        url: URL to fetch
        timeout: Request timeout in seconds

    Returns:
        Response body as text

    Raises:
        requests.RequestException: On connection errors, timeouts and non-2xx status
    """
    start = time.time()
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.debug(f"GET {url} failed: {e}")
        raise

    logger.debug(f"Fetched from {url}: {time.time() - start:.2f} seconds")
    return response.text
