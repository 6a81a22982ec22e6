class DashboardError(Exception):
    """Base error carrying the HTTP status and the short public message."""

    status = 500
    default_message = 'Server error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DashboardError):
    status = 400
    default_message = 'Invalid request'


class NotFoundError(DashboardError):
    """Upstream answered, but has no data for the query."""
    status = 404
    default_message = 'Not found'


class UpstreamError(DashboardError):
    """Transport failure or an upstream payload we can't use."""
    status = 500
