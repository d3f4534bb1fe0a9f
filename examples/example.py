"""Walk through the three Holiday and Event API operations."""

from __future__ import annotations

import asyncio

from holiday_event_api import (
    GetEventInfoRequest,
    GetEventsRequest,
    HolidayEventApiClient,
    HolidayEventApiError,
    SearchRequest,
)

# Get a FREE API key from https://apilayer.com/marketplace/checkiday-api#pricing
API_KEY = "<your API key>"


async def main() -> None:
    try:
        async with HolidayEventApiClient(API_KEY) as client:
            # These parameters are all optional; the service defaults to
            # today's events in America/Chicago without adult content.
            events = await client.async_get_events(
                GetEventsRequest(date="today", adult=False, timezone="America/Chicago")
            )
            event = events.events[0]
            print(f"Today is {event.name}! Find more information at: {event.url}.")
            print(
                "Rate limit remaining: "
                f"{events.rate_limit.remaining_month}/{events.rate_limit.limit_month} (month)."
            )

            # start/end bound the years used for event_info.event.occurrences
            event_info = await client.async_get_event_info(
                GetEventInfoRequest(id=event.id, start=2020, end=2030)
            )
            print(f"The Event's hashtags are {event_info.event.hashtags}.")

            query = "pizza day"
            search = await client.async_search(SearchRequest(query=query))
            print(
                f"Found {len(search.events)} events, including {search.events[0].name}, "
                f'that match the query "{query}".'
            )
    except HolidayEventApiError as err:
        print(err)


if __name__ == "__main__":
    asyncio.run(main())
