"""Reshape raw provider payloads into the dashboard's JSON contract.

Everything here is pure: a provider dict goes in, a plain dict ready for
``JsonResponse`` comes out. Optional upstream fields degrade to ``0`` or
``None``; a payload missing the fields the contract requires raises
``UpstreamError`` so the endpoint answers 500.
"""
from .errors import UpstreamError
from .services import NEWS_PAGE_SIZE

CURRENCY_CODES = ('USD', 'EUR', 'GBP', 'JPY', 'CNY', 'RUB', 'KZT')


def _number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _rain_3h(payload) -> float:
    rain = payload.get('rain') or {}
    if not isinstance(rain, dict):
        return 0.0
    value = _number(rain.get('3h'))
    if value is None or value < 0:
        return 0.0
    return float(value)


def normalize_weather(payload):
    try:
        main = payload['main']
        condition = payload['weather'][0]
        coord = payload['coord']
        return {
            'city': payload['name'],
            'country': (payload.get('sys') or {}).get('country'),
            'temperature': main['temp'],
            'feels_like': main.get('feels_like'),
            'humidity': main.get('humidity'),
            'pressure': main.get('pressure'),
            'wind_speed': (payload.get('wind') or {}).get('speed'),
            'description': condition.get('description'),
            'icon': condition.get('icon'),
            'coordinates': {
                'lat': float(coord['lat']),
                'lon': float(coord['lon']),
            },
            'rain_3h': _rain_3h(payload),
        }
    except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
        raise UpstreamError() from e


def _article(raw):
    return {
        'title': raw.get('title'),
        'description': raw.get('description'),
        'url': raw.get('url'),
        'publishedAt': raw.get('publishedAt'),
        'source': (raw.get('source') or {}).get('name'),
        'image': raw.get('urlToImage'),
    }


def normalize_news(payload):
    articles = payload.get('articles')
    if not isinstance(articles, list):
        raise UpstreamError()
    try:
        return {'articles': [_article(a) for a in articles[:NEWS_PAGE_SIZE]]}
    except AttributeError as e:
        raise UpstreamError() from e


def normalize_rates(payload):
    """Keep only the dashboard currencies; a code the provider omits comes back as None."""
    rates = payload.get('rates')
    if not isinstance(rates, dict):
        raise UpstreamError()
    return {
        'base': payload.get('base'),
        'date': payload.get('date'),
        'rates': {code: _number(rates.get(code)) for code in CURRENCY_CODES},
    }
