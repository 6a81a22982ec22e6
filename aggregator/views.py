import logging
from functools import wraps

from django.http import JsonResponse
from django.shortcuts import render

from .errors import DashboardError, ValidationError
from .normalizers import normalize_news, normalize_rates, normalize_weather
from .services import fetch_news, fetch_rates, fetch_weather

logger = logging.getLogger(__name__)


def index(request):
    return render(request, 'aggregator/index.html')


def _param(request, name):
    return (request.GET.get(name) or '').strip()


def endpoint_not_found(request, exception=None):
    return JsonResponse({'error': 'Endpoint not found'}, status=404)


def json_endpoint(view):
    """GET-only JSON endpoint; maps the error taxonomy onto ErrorResponse bodies."""
    @wraps(view)
    def wrapper(request, *args, **kwargs):
        if request.method != 'GET':
            return endpoint_not_found(request)
        try:
            return JsonResponse(view(request, *args, **kwargs))
        except DashboardError as e:
            if e.status >= 500:
                logger.error("%s failed: %s", request.path, e.__cause__ or e)
            return JsonResponse({'error': e.message}, status=e.status)
        except Exception:
            logger.exception("Unhandled error on %s", request.path)
            return JsonResponse({'error': 'Server error'}, status=500)
    return wrapper


@json_endpoint
def api_weather(request, config):
    city = _param(request, 'city')
    if not city:
        raise ValidationError('City is required')
    return normalize_weather(fetch_weather(config, city))


@json_endpoint
def api_news(request, config):
    return normalize_news(fetch_news(config, _param(request, 'city') or None))


@json_endpoint
def api_currency(request, config):
    return normalize_rates(fetch_rates(config, _param(request, 'base') or None))
