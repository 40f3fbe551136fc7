from dotenv import load_dotenv
import os

from github_profiles.errors import ConfigurationError

load_dotenv()  # take environment variables from .env

DEFAULT_API_BASE_URL = "https://api.github.com"
DEFAULT_REQUEST_TIMEOUT = 30.0


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def api_base_url() -> str:
    """Root of the GitHub REST API, without trailing slash."""
    return (env_get("GITHUB_API_BASE_URL") or DEFAULT_API_BASE_URL).rstrip("/")


def api_token() -> str | None:
    return env_get("GITHUB_TOKEN") or None


def request_timeout() -> float:
    raw = env_get("GITHUB_REQUEST_TIMEOUT")
    if raw is None or raw == "":
        return DEFAULT_REQUEST_TIMEOUT

    try:
        timeout = float(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"GITHUB_REQUEST_TIMEOUT must be a number, got {raw!r}"
        ) from e

    if timeout <= 0:
        raise ConfigurationError(
            f"GITHUB_REQUEST_TIMEOUT must be positive, got {raw!r}",
            hint="Unset it to use the default of 30 seconds.",
        )
    return timeout
