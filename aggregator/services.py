import logging

import requests
from requests.utils import quote

from .errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

HEADERS = {"User-Agent": "CityDashboard/1.0"}

DEFAULT_NEWS_QUERY = "world"
DEFAULT_BASE_CURRENCY = "USD"
NEWS_PAGE_SIZE = 5


def _get_json(url: str, params, timeout: float, not_found: str, provider: str):
    """One GET against a provider. Non-2xx means "no data", anything else broken is a server error."""
    try:
        r = requests.get(url, params=params, headers=HEADERS, timeout=timeout)
    except requests.RequestException as e:
        logger.error("%s request failed: %s", provider, e)
        raise UpstreamError() from e
    if not r.ok:
        logger.warning("%s answered HTTP %s", provider, r.status_code)
        raise NotFoundError(not_found)
    try:
        data = r.json()
    except ValueError as e:
        logger.error("%s returned a body that is not JSON", provider)
        raise UpstreamError() from e
    if not isinstance(data, dict):
        logger.error("%s returned %s instead of an object", provider, type(data).__name__)
        raise UpstreamError()
    return data


def fetch_weather(config, city: str):
    """Current conditions for a city from OpenWeatherMap (metric units)."""
    params = {"q": city, "appid": config.weather_api_key, "units": "metric"}
    return _get_json(config.weather_url, params, config.timeout, "City not found", "weather")


def fetch_news(config, city=None):
    """Latest English headlines mentioning the city; "world" when no city is given."""
    params = {
        "q": city or DEFAULT_NEWS_QUERY,
        "language": "en",
        "sortBy": "publishedAt",
        "pageSize": NEWS_PAGE_SIZE,
        "apiKey": config.news_api_key,
    }
    return _get_json(config.news_url, params, config.timeout, "News not found", "news")


def fetch_rates(config, base=None):
    base = base or DEFAULT_BASE_CURRENCY
    url = f"{config.exchange_url}/{quote(base, safe='')}"
    return _get_json(url, None, config.timeout, "Currency data not found", "exchange")
