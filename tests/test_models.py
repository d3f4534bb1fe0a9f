"""Tests for request parameter building and response parsing."""

from __future__ import annotations

import dataclasses

import pytest

from holiday_event_api import (
    EventInfo,
    GetEventInfoRequest,
    GetEventInfoResponse,
    GetEventsRequest,
    GetEventsResponse,
    InvalidArgument,
    Occurrence,
    RateLimit,
    SearchRequest,
    SearchResponse,
)


# =========================================================================== #
#  Request parameter sets
# =========================================================================== #


class TestGetEventsRequest:
    def test_defaults_only_send_adult(self):
        assert GetEventsRequest().to_params() == {"adult": "false"}

    def test_all_parameters(self):
        request = GetEventsRequest(date="7/16/1969", adult=True, timezone="Europe/Berlin")
        assert request.to_params() == {
            "adult": "true",
            "date": "7/16/1969",
            "timezone": "Europe/Berlin",
        }

    def test_is_immutable(self):
        request = GetEventsRequest()
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.adult = True  # type: ignore[misc]


class TestGetEventInfoRequest:
    def test_id_only(self):
        assert GetEventInfoRequest(id="abc").to_params() == {"id": "abc"}

    def test_year_range(self):
        params = GetEventInfoRequest(id="abc", start=2020, end=2030).to_params()
        assert params == {"id": "abc", "start": "2020", "end": "2030"}

    def test_open_ended_range(self):
        assert GetEventInfoRequest(id="abc", end=2030).to_params() == {"id": "abc", "end": "2030"}

    def test_single_year_range_is_allowed(self):
        params = GetEventInfoRequest(id="abc", start=2024, end=2024).to_params()
        assert params["start"] == params["end"] == "2024"

    def test_empty_id(self):
        with pytest.raises(InvalidArgument, match="Event id is required."):
            GetEventInfoRequest(id="").to_params()

    def test_inverted_range(self):
        with pytest.raises(InvalidArgument, match="after end year"):
            GetEventInfoRequest(id="abc", start=2031, end=2030).to_params()


class TestSearchRequest:
    def test_defaults(self):
        assert SearchRequest(query="pizza day").to_params() == {
            "query": "pizza day",
            "adult": "false",
        }

    def test_adult(self):
        assert SearchRequest(query="pizza", adult=True).to_params()["adult"] == "true"

    def test_empty_query(self):
        with pytest.raises(InvalidArgument, match="Search query is required."):
            SearchRequest(query="").to_params()


# =========================================================================== #
#  Response parsing
# =========================================================================== #


class TestResponseParsing:
    def test_events_response(self, fixture_json):
        data = fixture_json("getEvents-default.json")
        limit = RateLimit(limit_month=5, remaining_month=4)

        result = GetEventsResponse.from_api_response(data, rate_limit=limit)

        assert len(result.events) == len(data["events"])
        assert len(result.multiday_starting) == 1
        assert len(result.multiday_ongoing) == 2
        assert result.rate_limit is limit

    def test_event_info_matches_fixture(self, fixture_json):
        data = fixture_json("getEventInfo-default.json")

        result = GetEventInfoResponse.from_api_response(data, rate_limit=RateLimit())

        assert result.event.id == data["event"]["id"]
        assert result.event.name == data["event"]["name"]
        assert result.event.alternate_names[0].first_year == 2005
        assert result.event.patterns is not None
        assert result.event.patterns[0].observed == "annually on August 8th"

    def test_starter_plan_leaves_optional_fields_empty(self, fixture_json):
        event = EventInfo.from_api_response(fixture_json("getEventInfo-starter.json")["event"])

        assert event.hashtags is None
        assert event.image is None
        assert event.occurrences is None
        assert event.analytics is None

    def test_search_response(self, fixture_json):
        result = SearchResponse.from_api_response(
            fixture_json("search-parameters.json"), rate_limit=RateLimit()
        )
        assert result.adult is True
        assert len(result.events) == 1

    @pytest.mark.parametrize("value", ["08/08/2020", 1734772794, -12345])
    def test_occurrence_accepts_string_or_timestamp(self, value):
        assert Occurrence.from_api_response({"date": value, "length": 1}).date == value

    @pytest.mark.parametrize("value", [1.5, True, None, ["08/08/2020"]])
    def test_occurrence_rejects_other_dates(self, value):
        with pytest.raises(TypeError):
            Occurrence.from_api_response({"date": value, "length": 1})

    def test_missing_required_field(self):
        with pytest.raises(KeyError):
            EventInfo.from_api_response({"id": "x", "name": "y", "url": "z"})

    def test_non_list_collection(self):
        with pytest.raises(TypeError):
            SearchResponse.from_api_response(
                {"query": "q", "adult": False, "events": {}}, rate_limit=RateLimit()
            )

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("description", "plain"),
            ("how_to_observe", ["text"]),
            ("image", "https://static.checkiday.com/img/300/kittens.jpg"),
            ("analytics", 12),
        ],
    )
    def test_nested_object_must_be_a_mapping(self, fixture_json, field, value):
        data = fixture_json("getEventInfo-default.json")["event"]
        data[field] = value
        with pytest.raises(TypeError, match="Expected an object"):
            EventInfo.from_api_response(data)

    @pytest.mark.parametrize("value", ["false", 0, None])
    def test_adult_must_be_a_boolean(self, fixture_json, value):
        data = fixture_json("search-default.json")
        data["adult"] = value
        with pytest.raises(TypeError, match="Expected a boolean"):
            SearchResponse.from_api_response(data, rate_limit=RateLimit())

    def test_hashtags_must_be_strings(self, fixture_json):
        data = fixture_json("getEventInfo-default.json")["event"]
        data["hashtags"] = ["CatDay", 7]
        with pytest.raises(TypeError, match="Expected a string"):
            EventInfo.from_api_response(data)
