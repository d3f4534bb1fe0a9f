"""API key handling for the Holiday and Event API."""

from __future__ import annotations

import platform

from .const import HEADER_API_KEY, HEADER_PLATFORM_VERSION, SIGNUP_URL, USER_AGENT
from .exceptions import ConfigurationError


class ApiKeyAuth:
    """Validates an API key and builds the headers sent with every request.

    The key is checked once, at construction, so a bad key fails before
    any network traffic. Instances are immutable and safe to share.
    """

    def __init__(self, api_key: str) -> None:
        if not api_key or not _is_header_safe(api_key):
            raise ConfigurationError(
                f"Please provide a valid API key. Get one at {SIGNUP_URL}."
            )
        self._headers: dict[str, str] = {
            HEADER_API_KEY: api_key,
            "User-Agent": USER_AGENT,
            HEADER_PLATFORM_VERSION: platform.python_version(),
            "Accept": "application/json",
        }

    def get_headers(self) -> dict[str, str]:
        """Return a fresh copy of the request headers."""
        return dict(self._headers)

    def __repr__(self) -> str:
        # Never leak the key through reprs or log records.
        return f"{type(self).__name__}(api_key=<redacted>)"


def _is_header_safe(value: str) -> bool:
    """Reject control characters and DEL in header values."""
    for char in value:
        code = ord(char)
        if (code < 0x20 and char != "\t") or code == 0x7F:
            return False
    return True
