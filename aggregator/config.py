from dataclasses import dataclass

WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
NEWS_URL = "https://newsapi.org/v2/everything"
EXCHANGE_URL = "https://api.exchangerate-api.com/v4/latest"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class ProviderConfig:
    """Upstream endpoints and secrets, built once at startup and handed to the clients."""
    weather_api_key: str = ""
    news_api_key: str = ""
    weather_url: str = WEATHER_URL
    news_url: str = NEWS_URL
    exchange_url: str = EXCHANGE_URL
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_settings(cls, settings) -> "ProviderConfig":
        return cls(
            weather_api_key=getattr(settings, 'OPENWEATHER_API_KEY', '') or '',
            news_api_key=getattr(settings, 'NEWS_API_KEY', '') or '',
            weather_url=getattr(settings, 'WEATHER_URL', None) or WEATHER_URL,
            news_url=getattr(settings, 'NEWS_URL', None) or NEWS_URL,
            exchange_url=(getattr(settings, 'EXCHANGE_URL', None) or EXCHANGE_URL).rstrip('/'),
            timeout=_parse_timeout(getattr(settings, 'UPSTREAM_TIMEOUT', None)),
        )


def _parse_timeout(raw) -> float:
    if raw is None:
        return DEFAULT_TIMEOUT
    try:
        value = float(str(raw).strip())
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT
