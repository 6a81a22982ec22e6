"""Dashboard controller: the search state machine behind the map page.

The browser runs the same flow in ``static/aggregator/dashboard.js``; this
module keeps it in Python so it can be driven from ``manage.py city_search``
and tested without a browser. State lives in an immutable ``UIState`` that
every operation takes and returns.
"""
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

BANNER_SECONDS = 5.0
DEFAULT_CENTER = (51.505, -0.09)
DEFAULT_ZOOM = 13

EMPTY_CITY = 'Please enter a city name'
NO_NEWS = 'No news found for this city'
GENERIC_FAILURE = 'Something went wrong. Please try again.'


class PanelFetchError(Exception):
    """A dashboard endpoint failed; ``message`` is what the banner shows."""

    def __init__(self, message):
        self.message = message
        super().__init__(message)


class DashboardApi:
    """Thin client for the three aggregation endpoints."""

    def __init__(self, base_url: str, timeout: float = 10.0, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, path: str, params, fallback: str):
        try:
            r = self.session.get(f"{self.base_url}{path}", params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise PanelFetchError(fallback) from e
        try:
            data = r.json()
        except ValueError:
            data = None
        if not r.ok:
            message = data.get('error') if isinstance(data, dict) else None
            raise PanelFetchError(message or fallback)
        if not isinstance(data, dict):
            raise PanelFetchError(fallback)
        return data

    def weather(self, city: str):
        return self._get('/api/weather', {'city': city}, 'Failed to fetch weather data')

    def news(self, city: str):
        return self._get('/api/news', {'city': city}, 'Failed to fetch news')

    def currency(self, base: str = 'USD'):
        return self._get('/api/currency', {'base': base}, 'Failed to fetch currency data')


@dataclass(frozen=True)
class Banner:
    message: str
    shown_at: float

    def is_visible(self, now: float) -> bool:
        return now - self.shown_at < BANNER_SECONDS


@dataclass(frozen=True)
class Marker:
    lat: float
    lon: float
    popup: str


@dataclass(frozen=True)
class MapState:
    center: Tuple[float, float] = DEFAULT_CENTER
    zoom: int = DEFAULT_ZOOM
    marker: Optional[Marker] = None

    def focus(self, lat: float, lon: float, label: str) -> "MapState":
        # One marker at a time: the new one replaces whatever was there.
        popup = f"{label}\nLat: {lat}\nLon: {lon}"
        return replace(self, center=(lat, lon), zoom=DEFAULT_ZOOM, marker=Marker(lat, lon, popup))


@dataclass(frozen=True)
class PanelState:
    status: str = 'idle'  # idle | ready | empty | failed
    data: Any = None
    message: Optional[str] = None

    @classmethod
    def failed(cls, what: str) -> "PanelState":
        return cls(status='failed', message=f'Failed to load {what}')


@dataclass(frozen=True)
class UIState:
    loading: bool = False
    banner: Optional[Banner] = None
    weather: PanelState = field(default_factory=PanelState)
    news: PanelState = field(default_factory=PanelState)
    currency: PanelState = field(default_factory=PanelState)
    map: MapState = field(default_factory=MapState)


class DashboardOrchestrator:
    def __init__(self, api, clock: Callable[[], float] = time.monotonic,
                 listener: Optional[Callable[[UIState], None]] = None):
        self.api = api
        self.clock = clock
        self.listener = listener

    def _emit(self, state: UIState) -> UIState:
        if self.listener is not None:
            self.listener(state)
        return state

    def _banner(self, message: str) -> Banner:
        return Banner(message, self.clock())

    def _fetch(self, call, *args):
        """Run one endpoint call; returns ``(data, error_message)`` and never raises."""
        try:
            return call(*args), None
        except PanelFetchError as e:
            return None, e.message
        except Exception:
            logger.exception("Dashboard request crashed")
            return None, GENERIC_FAILURE

    def load(self, state: Optional[UIState] = None) -> UIState:
        """Initial page load: currency for USD, fetched once and never on search."""
        state = state or UIState()
        data, error = self._fetch(self.api.currency, 'USD')
        if error:
            state = replace(state, banner=self._banner(error), currency=PanelState.failed('currency data'))
        else:
            state = replace(state, currency=PanelState(status='ready', data=data))
        return self._emit(state)

    def search(self, state: UIState, city: str) -> UIState:
        city = (city or '').strip()
        if not city:
            return self._emit(replace(state, banner=self._banner(EMPTY_CITY)))

        state = self._emit(replace(state, loading=True))
        with ThreadPoolExecutor(max_workers=2) as pool:
            weather_job = pool.submit(self._fetch, self.api.weather, city)
            news_job = pool.submit(self._fetch, self.api.news, city)
            weather, weather_error = weather_job.result()
            news, news_error = news_job.result()

        state = self._apply_weather(state, weather, weather_error)
        state = self._apply_news(state, news, news_error)
        return self._emit(replace(state, loading=False))

    def _apply_weather(self, state, data, error):
        if error:
            return replace(state, banner=self._banner(error), weather=PanelState.failed('weather data'))
        coords = data.get('coordinates') or {}
        try:
            lat, lon = float(coords['lat']), float(coords['lon'])
        except (KeyError, TypeError, ValueError):
            return replace(state, banner=self._banner(GENERIC_FAILURE), weather=PanelState.failed('weather data'))
        return replace(
            state,
            weather=PanelState(status='ready', data=data),
            map=state.map.focus(lat, lon, data.get('city') or ''),
        )

    def _apply_news(self, state, data, error):
        if error:
            return replace(state, banner=self._banner(error), news=PanelState.failed('news'))
        articles = data.get('articles') or []
        if not articles:
            return replace(state, news=PanelState(status='empty', data=[], message=NO_NEWS))
        return replace(state, news=PanelState(status='ready', data=articles))
