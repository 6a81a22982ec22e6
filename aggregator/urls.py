from django.conf import settings
from django.urls import path, re_path

from . import views
from .config import ProviderConfig

providers = {'config': ProviderConfig.from_settings(settings)}

urlpatterns = [
    path('', views.index, name='index'),
    path('api/weather', views.api_weather, providers, name='api_weather'),
    path('api/news', views.api_news, providers, name='api_news'),
    path('api/currency', views.api_currency, providers, name='api_currency'),
    re_path(r'^.*$', views.endpoint_not_found, name='endpoint_not_found'),
]
