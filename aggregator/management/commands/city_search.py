from django.core.management.base import BaseCommand
from django.template.loader import render_to_string

from aggregator.orchestrator import DashboardApi, DashboardOrchestrator


class Command(BaseCommand):
    help = "Search a city against a running dashboard server and print the three panels."

    def add_arguments(self, parser):
        parser.add_argument('city')
        parser.add_argument('--base-url', default='http://127.0.0.1:8000')
        parser.add_argument('--timeout', type=float, default=10.0)

    def handle(self, *args, **opts):
        orchestrator = DashboardOrchestrator(
            DashboardApi(opts['base_url'], timeout=opts['timeout']),
            listener=self._progress,
        )
        state = orchestrator.load()
        state = orchestrator.search(state, opts['city'])
        if state.banner and state.banner.is_visible(orchestrator.clock()):
            self.stderr.write(self.style.ERROR(state.banner.message))
        self.stdout.write(render_to_string('aggregator/dashboard.txt', {'state': state}))

    def _progress(self, state):
        if state.loading:
            self.stdout.write('Loading...')
