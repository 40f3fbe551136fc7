from __future__ import annotations


class ProfileAdapterError(Exception):
    """
    Base class for all adapter errors.

    Attributes:
        message: Human-readable error message.
        hint: Optional remediation hint.
    """

    def __init__(self, message: str, *, hint: str | None = None):
        super().__init__(message)
        self.message = message
        self.hint = hint

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\n\nHint:\n{self.hint}"
        return self.message


class RemoteServiceError(ProfileAdapterError):
    """Raised when the remote API answers with an error envelope."""


class MalformedResponseError(ProfileAdapterError):
    """Raised when a response body cannot be turned into rows."""


class ConfigurationError(ProfileAdapterError):
    """Raised when an environment setting has an unusable value."""
