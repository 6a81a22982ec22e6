from django.apps import AppConfig


class AggregatorConfig(AppConfig):
    name = 'aggregator'
    verbose_name = 'City dashboard aggregator'
