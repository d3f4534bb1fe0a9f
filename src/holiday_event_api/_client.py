"""Holiday and Event API client."""

from __future__ import annotations

import asyncio
import logging
from http import HTTPStatus
from typing import Any, Callable, Mapping, TypeVar

import aiohttp
from yarl import URL

from ._auth import ApiKeyAuth
from .const import (
    BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    EVENT_INFO_ENDPOINT,
    EVENTS_ENDPOINT,
    HEADER_RATE_LIMIT_MONTH,
    HEADER_RATE_REMAINING_MONTH,
    SEARCH_ENDPOINT,
)
from .exceptions import (
    ApiConnectionError,
    ConfigurationError,
    DeserializationError,
    HttpError,
    NotFound,
    RateLimitExceeded,
    ServerError,
    Unauthorized,
)
from .models import (
    GetEventInfoRequest,
    GetEventInfoResponse,
    GetEventsRequest,
    GetEventsResponse,
    RateLimit,
    SearchRequest,
    SearchResponse,
)

_LOGGER = logging.getLogger(__name__)

_R = TypeVar("_R")


class HolidayEventApiClient:
    """Async client for the Holiday and Event API.

    Usage::

        async with HolidayEventApiClient("<your API key>") as client:
            response = await client.async_get_events()
            for event in response.events:
                print(event.name, event.url)

    If no session is provided, the client creates and manages its own.
    The caller is responsible for calling ``async_close()`` when done
    (or use the client as an async context manager).

    The client holds no per-call state, so one instance can serve any
    number of concurrent calls.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        session: aiohttp.ClientSession | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._auth = ApiKeyAuth(api_key)
        self._base_url = _parse_base_url(base_url)
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._owns_session = session is None
        self._session = session or aiohttp.ClientSession()

    async def __aenter__(self) -> HolidayEventApiClient:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.async_close()

    @property
    def base_url(self) -> str:
        """Root URL that endpoint paths are resolved against."""
        return str(self._base_url)

    async def async_close(self) -> None:
        """Close the HTTP session if the client owns it."""
        if self._owns_session:
            await self._session.close()

    # ------------------------------------------------------------------ #
    #  Operations
    # ------------------------------------------------------------------ #

    async def async_get_events(
        self, request: GetEventsRequest | None = None
    ) -> GetEventsResponse:
        """Fetch the events for a date.

        Without a request, the service's defaults apply: today's events in
        the ``America/Chicago`` timezone, excluding adult content.
        """
        request = request or GetEventsRequest()
        return await self._request(
            EVENTS_ENDPOINT, request.to_params(), GetEventsResponse.from_api_response
        )

    async def async_get_event_info(
        self, request: GetEventInfoRequest
    ) -> GetEventInfoResponse:
        """Fetch the details of one event.

        Raises:
            InvalidArgument: If the event id is empty or the year range is
                inverted. No request is sent.
            NotFound: If the service does not know the event id.
        """
        params = request.to_params()
        return await self._request(
            EVENT_INFO_ENDPOINT, params, GetEventInfoResponse.from_api_response
        )

    async def async_search(self, request: SearchRequest) -> SearchResponse:
        """Search for events matching a free-text query.

        Raises:
            InvalidArgument: If the query is empty. No request is sent.
            HttpError: If the service rejects the query (too short, too
                many results).
        """
        params = request.to_params()
        return await self._request(
            SEARCH_ENDPOINT, params, SearchResponse.from_api_response
        )

    # ------------------------------------------------------------------ #
    #  Internal HTTP layer
    # ------------------------------------------------------------------ #

    async def _request(
        self,
        path: str,
        params: dict[str, str],
        parse: Callable[..., _R],
    ) -> _R:
        """Execute a GET request and parse the JSON body.

        Raises:
            Unauthorized: On 401/403 responses.
            NotFound: On 404 responses.
            RateLimitExceeded: On 429 responses.
            ServerError: On 5xx responses.
            HttpError: On other non-2xx responses.
            DeserializationError: If the body cannot be parsed.
            ApiConnectionError: On network errors and timeouts.
        """
        url = self._base_url.join(URL(path))
        _LOGGER.debug("GET %s params=%s", url, params)

        try:
            async with self._session.get(
                url,
                params=params,
                headers=self._auth.get_headers(),
                timeout=self._timeout,
            ) as resp:
                rate_limit = _parse_rate_limit(resp.headers)

                if not 200 <= resp.status < 300:
                    message = await _read_error_message(resp)
                    _LOGGER.debug("GET %s failed: HTTP %s - %s", path, resp.status, message)
                    raise _classify_error(resp, message, rate_limit)

                try:
                    data = await resp.json(content_type=None)
                except ValueError as err:
                    raise DeserializationError(f"Can't parse response: {err}") from err

        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise ApiConnectionError(f"Can't process request: {err!r}") from err

        if not isinstance(data, dict):
            raise DeserializationError(
                f"Can't parse response: expected a JSON object, got {type(data).__name__}"
            )
        try:
            return parse(data, rate_limit=rate_limit)
        except (AttributeError, KeyError, TypeError, ValueError) as err:
            raise DeserializationError(f"Can't parse response: {err!r}") from err


def _parse_base_url(base_url: str) -> URL:
    """Validate the base URL and make sure endpoint paths append to it."""
    try:
        url = URL(base_url)
    except (TypeError, ValueError) as err:
        raise ConfigurationError("Invalid base_url.") from err
    if not url.is_absolute() or url.scheme not in ("http", "https"):
        raise ConfigurationError("Invalid base_url.")
    if not url.path.endswith("/"):
        url = url.with_path(url.path + "/")
    return url


def _parse_rate_limit(headers: Mapping[str, str]) -> RateLimit:
    return RateLimit(
        limit_month=_int_header(headers, HEADER_RATE_LIMIT_MONTH),
        remaining_month=_int_header(headers, HEADER_RATE_REMAINING_MONTH),
    )


def _int_header(headers: Mapping[str, str], name: str) -> int:
    try:
        return int(headers.get(name, ""))
    except ValueError:
        return 0


async def _read_error_message(resp: aiohttp.ClientResponse) -> str:
    """Prefer the service's ``error`` field, then the status reason phrase."""
    try:
        body = await resp.json(content_type=None)
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, str) and error:
            return error
    try:
        return HTTPStatus(resp.status).phrase
    except ValueError:
        return str(resp.status)


def _classify_error(
    resp: aiohttp.ClientResponse, message: str, rate_limit: RateLimit
) -> HttpError:
    status = resp.status
    if status in (401, 403):
        return Unauthorized(message, status_code=status, rate_limit=rate_limit)
    if status == 404:
        return NotFound(message, status_code=status, rate_limit=rate_limit)
    if status == 429:
        return RateLimitExceeded(
            message,
            rate_limit=rate_limit,
            retry_after=_retry_after(resp.headers.get("Retry-After")),
        )
    if status >= 500:
        return ServerError(message, status_code=status, rate_limit=rate_limit)
    return HttpError(message, status_code=status, rate_limit=rate_limit)


def _retry_after(value: str | None) -> float | None:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        # HTTP-date form is not interpreted.
        return None
