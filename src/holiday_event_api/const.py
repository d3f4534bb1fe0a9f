"""Constants for the Holiday and Event API client."""

__version__ = "1.2.0"

BASE_URL = "https://api.apilayer.com/checkiday/"
SIGNUP_URL = "https://apilayer.com/marketplace/checkiday-api#pricing"

EVENTS_ENDPOINT = "events"
EVENT_INFO_ENDPOINT = "event"
SEARCH_ENDPOINT = "search"

HEADER_API_KEY = "apikey"
HEADER_PLATFORM_VERSION = "X-Platform-Version"
HEADER_RATE_LIMIT_MONTH = "X-RateLimit-Limit-Month"
HEADER_RATE_REMAINING_MONTH = "X-RateLimit-Remaining-Month"

USER_AGENT = f"HolidayApiPython/{__version__}"

DEFAULT_TIMEOUT_SECONDS = 10.0
