"""Async Python client for the Holiday and Event API."""

from .const import __version__
from ._client import HolidayEventApiClient
from .exceptions import (
    ApiConnectionError,
    ConfigurationError,
    DeserializationError,
    HolidayEventApiError,
    HttpError,
    InvalidArgument,
    NotFound,
    RateLimitExceeded,
    ServerError,
    Unauthorized,
)
from .models import (
    AlternateName,
    Analytics,
    DateOrTimestamp,
    EventInfo,
    EventSummary,
    FounderInfo,
    GetEventInfoRequest,
    GetEventInfoResponse,
    GetEventsRequest,
    GetEventsResponse,
    ImageInfo,
    Occurrence,
    Pattern,
    RateLimit,
    RichText,
    SearchRequest,
    SearchResponse,
    Tag,
)

__all__ = [
    "__version__",
    "HolidayEventApiClient",
    "ApiConnectionError",
    "ConfigurationError",
    "DeserializationError",
    "HolidayEventApiError",
    "HttpError",
    "InvalidArgument",
    "NotFound",
    "RateLimitExceeded",
    "ServerError",
    "Unauthorized",
    "AlternateName",
    "Analytics",
    "DateOrTimestamp",
    "EventInfo",
    "EventSummary",
    "FounderInfo",
    "GetEventInfoRequest",
    "GetEventInfoResponse",
    "GetEventsRequest",
    "GetEventsResponse",
    "ImageInfo",
    "Occurrence",
    "Pattern",
    "RateLimit",
    "RichText",
    "SearchRequest",
    "SearchResponse",
    "Tag",
]
