"""Data models for Holiday and Event API requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar, Union

from .exceptions import InvalidArgument

_T = TypeVar("_T")

# The service reports dates either as a formatted string ("05/05/2025")
# or as a Unix timestamp in seconds.
DateOrTimestamp = Union[str, int]


# ---------------------------------------------------------------------- #
#  Requests
# ---------------------------------------------------------------------- #


@dataclass(frozen=True)
class GetEventsRequest:
    """Parameters for fetching the events of a date.

    ``date`` and ``timezone`` are only sent when set; the service then
    falls back to ``"today"`` in ``"America/Chicago"``.
    """

    date: str | None = None
    adult: bool = False
    timezone: str | None = None

    def to_params(self) -> dict[str, str]:
        """Build the query string for the ``events`` endpoint."""
        params = {"adult": _format_bool(self.adult)}
        if self.timezone is not None:
            params["timezone"] = self.timezone
        if self.date is not None:
            params["date"] = self.date
        return params


@dataclass(frozen=True)
class GetEventInfoRequest:
    """Parameters for fetching a single event.

    When ``start`` and/or ``end`` are given, the service computes
    ``EventInfo.occurrences`` within that inclusive year range.
    """

    id: str
    start: int | None = None
    end: int | None = None

    def to_params(self) -> dict[str, str]:
        """Build the query string for the ``event`` endpoint.

        Raises:
            InvalidArgument: If the id is empty or the year range is inverted.
        """
        if not self.id:
            raise InvalidArgument("Event id is required.")
        if self.start is not None and self.end is not None and self.start > self.end:
            raise InvalidArgument(
                f"Start year {self.start} is after end year {self.end}."
            )
        params = {"id": self.id}
        if self.start is not None:
            params["start"] = str(self.start)
        if self.end is not None:
            params["end"] = str(self.end)
        return params


@dataclass(frozen=True)
class SearchRequest:
    """Parameters for a free-text event search."""

    query: str
    adult: bool = False

    def to_params(self) -> dict[str, str]:
        """Build the query string for the ``search`` endpoint.

        Raises:
            InvalidArgument: If the query is empty.
        """
        if not self.query:
            raise InvalidArgument("Search query is required.")
        return {"query": self.query, "adult": _format_bool(self.adult)}


# ---------------------------------------------------------------------- #
#  Shared response parts
# ---------------------------------------------------------------------- #


@dataclass(frozen=True)
class RateLimit:
    """Monthly quota counters reported by the service."""

    limit_month: int = 0
    remaining_month: int = 0


@dataclass(frozen=True)
class EventSummary:
    """Minimal event reference as returned by list endpoints."""

    id: str
    name: str
    url: str

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> EventSummary:
        """Construct from an API response dict."""
        return cls(id=data["id"], name=data["name"], url=data["url"])


@dataclass(frozen=True)
class AlternateName:
    """Another name an event is known by, optionally bounded by years."""

    name: str
    first_year: int | None = None
    last_year: int | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> AlternateName:
        return cls(
            name=data["name"],
            first_year=data.get("first_year"),
            last_year=data.get("last_year"),
        )


@dataclass(frozen=True)
class ImageInfo:
    """Event image URLs in three sizes."""

    small: str
    medium: str
    large: str

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> ImageInfo:
        return cls(small=data["small"], medium=data["medium"], large=data["large"])


@dataclass(frozen=True)
class RichText:
    """Formatted text in plain, HTML and Markdown renderings."""

    text: str | None = None
    html: str | None = None
    markdown: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> RichText:
        return cls(
            text=data.get("text"),
            html=data.get("html"),
            markdown=data.get("markdown"),
        )


@dataclass(frozen=True)
class Pattern:
    """How an event is observed, e.g. "annually on August 8th"."""

    observed: str
    observed_html: str
    observed_markdown: str
    length: int
    first_year: int | None = None
    last_year: int | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> Pattern:
        return cls(
            observed=data["observed"],
            observed_html=data["observed_html"],
            observed_markdown=data["observed_markdown"],
            length=int(data["length"]),
            first_year=data.get("first_year"),
            last_year=data.get("last_year"),
        )


@dataclass(frozen=True)
class FounderInfo:
    """Person or organization that founded an event."""

    name: str
    url: str | None = None
    date: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> FounderInfo:
        return cls(name=data["name"], url=data.get("url"), date=data.get("date"))


@dataclass(frozen=True)
class Occurrence:
    """A computed date on which an event falls, and its length in days."""

    date: DateOrTimestamp
    length: int

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> Occurrence:
        return cls(date=_parse_date(data["date"]), length=int(data["length"]))


@dataclass(frozen=True)
class Analytics:
    """Popularity figures for an event."""

    overall_rank: int
    social_rank: int
    social_shares: int
    popularity: str

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> Analytics:
        return cls(
            overall_rank=int(data["overall_rank"]),
            social_rank=int(data["social_rank"]),
            social_shares=int(data["social_shares"]),
            popularity=data["popularity"],
        )


@dataclass(frozen=True)
class Tag:
    """Category tag attached to an event."""

    name: str

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> Tag:
        return cls(name=data["name"])


@dataclass(frozen=True)
class EventInfo:
    """Full event details.

    Fields after ``alternate_names`` depend on the subscription plan and
    are ``None`` when the service omits them.
    """

    id: str
    name: str
    url: str
    adult: bool
    alternate_names: tuple[AlternateName, ...] = field(default_factory=tuple)
    hashtags: tuple[str, ...] | None = None
    image: ImageInfo | None = None
    sources: tuple[str, ...] | None = None
    description: RichText | None = None
    how_to_observe: RichText | None = None
    patterns: tuple[Pattern, ...] | None = None
    founders: tuple[FounderInfo, ...] | None = None
    occurrences: tuple[Occurrence, ...] | None = None
    analytics: Analytics | None = None
    tags: tuple[Tag, ...] | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any]) -> EventInfo:
        """Construct from an API response dict."""
        return cls(
            id=data["id"],
            name=data["name"],
            url=data["url"],
            adult=_parse_bool(data["adult"]),
            alternate_names=_parse_list(
                AlternateName.from_api_response, data["alternate_names"]
            ),
            hashtags=_optional_list(_parse_str, data.get("hashtags")),
            image=_optional(ImageInfo.from_api_response, data.get("image")),
            sources=_optional_list(_parse_str, data.get("sources")),
            description=_optional(RichText.from_api_response, data.get("description")),
            how_to_observe=_optional(
                RichText.from_api_response, data.get("how_to_observe")
            ),
            patterns=_optional_list(Pattern.from_api_response, data.get("patterns")),
            founders=_optional_list(FounderInfo.from_api_response, data.get("founders")),
            occurrences=_optional_list(
                Occurrence.from_api_response, data.get("occurrences")
            ),
            analytics=_optional(Analytics.from_api_response, data.get("analytics")),
            tags=_optional_list(Tag.from_api_response, data.get("tags")),
        )


# ---------------------------------------------------------------------- #
#  Responses
# ---------------------------------------------------------------------- #


@dataclass(frozen=True)
class GetEventsResponse:
    """Events falling on the requested date."""

    adult: bool
    date: DateOrTimestamp
    timezone: str
    events: tuple[EventSummary, ...]
    multiday_starting: tuple[EventSummary, ...]
    multiday_ongoing: tuple[EventSummary, ...]
    rate_limit: RateLimit = field(default_factory=RateLimit)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], *, rate_limit: RateLimit
    ) -> GetEventsResponse:
        """Construct from an API response dict and the response's quota headers."""
        return cls(
            adult=_parse_bool(data["adult"]),
            date=_parse_date(data["date"]),
            timezone=data["timezone"],
            events=_parse_list(EventSummary.from_api_response, data["events"]),
            multiday_starting=_parse_list(
                EventSummary.from_api_response, data["multiday_starting"]
            ),
            multiday_ongoing=_parse_list(
                EventSummary.from_api_response, data["multiday_ongoing"]
            ),
            rate_limit=rate_limit,
        )


@dataclass(frozen=True)
class GetEventInfoResponse:
    """Details of a single event."""

    event: EventInfo
    rate_limit: RateLimit = field(default_factory=RateLimit)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], *, rate_limit: RateLimit
    ) -> GetEventInfoResponse:
        return cls(event=EventInfo.from_api_response(data["event"]), rate_limit=rate_limit)


@dataclass(frozen=True)
class SearchResponse:
    """Events matching a search query."""

    query: str
    adult: bool
    events: tuple[EventSummary, ...]
    rate_limit: RateLimit = field(default_factory=RateLimit)

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], *, rate_limit: RateLimit
    ) -> SearchResponse:
        return cls(
            query=data["query"],
            adult=_parse_bool(data["adult"]),
            events=_parse_list(EventSummary.from_api_response, data["events"]),
            rate_limit=rate_limit,
        )


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _parse_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"Expected a boolean, got {value!r}")
    return value


def _parse_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected a string, got {value!r}")
    return value


def _parse_date(value: Any) -> DateOrTimestamp:
    """Accept a date string or an integer timestamp, nothing else."""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"Expected a date string or timestamp, got {value!r}")
    return value


def _parse_list(parse: Callable[[Any], _T], value: Any) -> tuple[_T, ...]:
    if not isinstance(value, list):
        raise TypeError(f"Expected a list, got {type(value).__name__}")
    return tuple(parse(item) for item in value)


def _optional_list(parse: Callable[[Any], _T], value: Any) -> tuple[_T, ...] | None:
    if value is None:
        return None
    return _parse_list(parse, value)


def _optional(parse: Callable[[Any], _T], value: Any) -> _T | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise TypeError(f"Expected an object, got {type(value).__name__}")
    return parse(value)
