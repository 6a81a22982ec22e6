"""Shared fixtures: canned provider payloads and mocked ``requests`` responses."""

from __future__ import annotations

import copy
from typing import Any
from unittest.mock import MagicMock

import pytest

from aggregator.config import ProviderConfig

PARIS_WEATHER: dict[str, Any] = {
    "coord": {"lon": 2.3488, "lat": 48.8534},
    "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
    "main": {
        "temp": 18.5,
        "feels_like": 18.1,
        "temp_min": 17.2,
        "temp_max": 19.4,
        "pressure": 1016,
        "humidity": 64,
    },
    "wind": {"speed": 4.12, "deg": 250},
    "sys": {"country": "FR", "sunrise": 1697696400, "sunset": 1697734800},
    "name": "Paris",
    "cod": 200,
}

NEWS_PAYLOAD: dict[str, Any] = {
    "status": "ok",
    "totalResults": 2,
    "articles": [
        {
            "source": {"id": None, "name": "Le Monde"},
            "author": "A. Writer",
            "title": "Paris opens new metro line",
            "description": "Line 15 starts service.",
            "url": "https://example.com/metro",
            "urlToImage": "https://example.com/metro.jpg",
            "publishedAt": "2026-10-18T09:00:00Z",
            "content": "...",
        },
        {
            "source": {"id": None, "name": "Wire"},
            "title": "Rain expected over the weekend",
            "url": "https://example.com/rain",
            "publishedAt": "2026-10-17T12:30:00Z",
        },
    ],
}

RATES_PAYLOAD: dict[str, Any] = {
    "provider": "https://www.exchangerate-api.com",
    "base": "USD",
    "date": "2026-10-19",
    "time_last_updated": 1760832001,
    "rates": {
        "USD": 1,
        "AED": 3.67,
        "EUR": 0.92,
        "GBP": 0.79,
        "JPY": 149.8,
        "CNY": 7.3,
        "RUB": 96.5,
        "KZT": 478.2,
        "CHF": 0.9,
    },
}


def create_mock_response(status: int = 200, json_data: Any = None, json_error: Exception | None = None) -> MagicMock:
    """Build a stand-in for ``requests.Response``.

    Args:
        status: HTTP status code
        json_data: Value returned by ``json()``
        json_error: Exception raised by ``json()`` instead

    Returns:
        Configured MagicMock response
    """
    response = MagicMock()
    response.status_code = status
    response.ok = status < 400
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(
        weather_api_key="weather-key",
        news_api_key="news-key",
        weather_url="https://weather.test/data/2.5/weather",
        news_url="https://news.test/v2/everything",
        exchange_url="https://fx.test/v4/latest",
        timeout=3.0,
    )


@pytest.fixture
def paris_weather() -> dict[str, Any]:
    return copy.deepcopy(PARIS_WEATHER)


@pytest.fixture
def news_payload() -> dict[str, Any]:
    return copy.deepcopy(NEWS_PAYLOAD)


@pytest.fixture
def rates_payload() -> dict[str, Any]:
    return copy.deepcopy(RATES_PAYLOAD)
