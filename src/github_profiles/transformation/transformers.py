"""
Response Transformers

Pure functions turning a raw response body into enriched rows:
1. normalize_response: body text → ordered list of raw items
2. enrich_item: raw item → row with ExternalId / DisplayUrl synthesized
"""

import json
import logging
from types import MappingProxyType
from typing import Any, Dict, List

from github_profiles.errors import MalformedResponseError
from github_profiles.models import Row
from .validators import check_error_envelope

logger = logging.getLogger(__name__)

ITEMS_KEY = "items"

# Remote field → synthesized column
IDENTITY_FIELD = "login"
PROFILE_LINK_FIELD = "html_url"
EXTERNAL_ID_COLUMN = "ExternalId"
DISPLAY_URL_COLUMN = "DisplayUrl"


def decode_body(raw_body: str) -> Any:
    try:
        return json.loads(raw_body)
    except (TypeError, ValueError) as e:
        raise MalformedResponseError(f"Response body is not valid JSON: {e}") from e


def to_items_envelope(payload: Any) -> Dict[str, Any]:
    """
    Coerce a decoded payload into the {"items": [...]} envelope

    - bare array → {"items": array}
    - object with a top-level "items" key → unchanged
    - any other object → {"items": [object]}
    """
    if isinstance(payload, list):
        return {ITEMS_KEY: payload}

    if isinstance(payload, dict):
        if ITEMS_KEY in payload:
            return payload
        return {ITEMS_KEY: [payload]}

    raise MalformedResponseError(
        f"Expected a JSON object or array, got {type(payload).__name__}"
    )


def normalize_response(raw_body: str) -> List[Dict[str, Any]]:
    """
    Normalize a raw response body into raw items

    Args:
        raw_body: Response text from the API

    Returns:
        List[Dict]: Raw items in response order

    Raises:
        RemoteServiceError: If the body is an error envelope
        MalformedResponseError: If the body cannot be read as items
    """
    payload = decode_body(raw_body)
    check_error_envelope(payload)

    items = to_items_envelope(payload)[ITEMS_KEY]
    if not isinstance(items, list):
        raise MalformedResponseError(
            f"'{ITEMS_KEY}' must be a list, got {type(items).__name__}"
        )

    for position, item in enumerate(items):
        if not isinstance(item, dict):
            raise MalformedResponseError(
                f"Item {position} is {type(item).__name__}, expected an object"
            )

    logger.debug(f"Normalized response into {len(items)} items")
    return list(items)


def enrich_item(item: Dict[str, Any]) -> Row:
    """
    Build a row from a raw item

    Every key is copied as-is. ExternalId mirrors login and DisplayUrl mirrors
    html_url; each is only present when its source field is.
    """
    row = dict(item)

    if IDENTITY_FIELD in item:
        row[EXTERNAL_ID_COLUMN] = item[IDENTITY_FIELD]
    if PROFILE_LINK_FIELD in item:
        row[DISPLAY_URL_COLUMN] = item[PROFILE_LINK_FIELD]

    return MappingProxyType(row)


def build_rows(raw_body: str) -> List[Row]:
    """Normalize a response body and enrich every item"""
    return [enrich_item(item) for item in normalize_response(raw_body)]
