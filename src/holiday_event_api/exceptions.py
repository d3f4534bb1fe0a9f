"""Exception hierarchy for the Holiday and Event API client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import RateLimit


class HolidayEventApiError(Exception):
    """Base exception for all Holiday and Event API errors."""


class ConfigurationError(HolidayEventApiError):
    """The client was constructed with an invalid API key or base URL."""


class InvalidArgument(HolidayEventApiError):
    """Request parameters were rejected before contacting the API."""


class ApiConnectionError(HolidayEventApiError):
    """API is unreachable (network error, DNS, timeout)."""


class DeserializationError(HolidayEventApiError):
    """The response body is not JSON or does not have the expected shape."""


class HttpError(HolidayEventApiError):
    """API returned a non-2xx response.

    Attributes:
        status_code: HTTP status code.
        rate_limit: Quota counters reported alongside the error, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        rate_limit: RateLimit | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.rate_limit = rate_limit


class Unauthorized(HttpError):
    """API key was rejected (HTTP 401/403)."""


class NotFound(HttpError):
    """Requested event does not exist (HTTP 404)."""


class RateLimitExceeded(HttpError):
    """API returned 429 Too Many Requests.

    Attributes:
        retry_after: Seconds to wait before retrying, if provided by the server.
    """

    def __init__(
        self,
        message: str = "Too Many Requests",
        *,
        status_code: int = 429,
        rate_limit: RateLimit | None = None,
        retry_after: float | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code, rate_limit=rate_limit)
        self.retry_after = retry_after


class ServerError(HttpError):
    """API failed on its side (HTTP 5xx)."""
