"""
Remote Payload Validators

Recognizes the error envelope the remote API can answer with and turns it into
typed failures.
"""

import logging
from typing import Any, List

from pydantic import BaseModel, Field, ValidationError

from github_profiles.errors import MalformedResponseError, RemoteServiceError

logger = logging.getLogger(__name__)

ERROR_KEY = "error"


class RemoteErrorDetail(BaseModel):
    """Single entry of the remote error list"""

    message: str = Field(..., description="Human-readable error message")


class RemoteErrorEnvelope(BaseModel):
    """Value stored under the top-level `error` key"""

    errors: List[RemoteErrorDetail] = Field(
        ..., min_length=1, description="Reported errors, most relevant first"
    )


def check_error_envelope(payload: Any) -> bool:
    """
    Raise if the decoded payload is an error envelope

    Args:
        payload: Decoded JSON value

    Returns:
        bool: True if the payload carries no error envelope

    Raises:
        RemoteServiceError: With the first reported message
        MalformedResponseError: If the envelope has no usable error entry
    """
    if not isinstance(payload, dict) or ERROR_KEY not in payload:
        return True

    try:
        envelope = RemoteErrorEnvelope.model_validate(payload[ERROR_KEY])
    except ValidationError as e:
        raise MalformedResponseError(f"Malformed error envelope: {e}") from e

    message = envelope.errors[0].message
    logger.error(f"❌ Remote service error: {message}")
    raise RemoteServiceError(message)
