"""
Prometheus metrics for the Dhamira web gateway.

Counts login outcomes and times calls to the upstream backend so the
gateway can be watched next to the backend's own dashboards.
"""

from prometheus_client import Counter, Histogram, start_http_server
import time
from contextlib import contextmanager


login_requests = Counter(
    'dhamira_gateway_login_requests_total',
    'Login requests handled by the gateway',
    ['outcome']
)

upstream_requests = Counter(
    'dhamira_gateway_upstream_requests_total',
    'Total requests to the upstream backend',
    ['endpoint', 'status']
)

upstream_request_duration = Histogram(
    'dhamira_gateway_upstream_request_duration_seconds',
    'Duration of requests to the upstream backend',
    ['endpoint'],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)


class MetricsManager:
    """Manager for Prometheus metrics with context managers for timing."""
    
    def __init__(self):
        self._metrics_server_started = False
    
    def start_metrics_server(self, port: int = 8090) -> None:
        """Start Prometheus metrics HTTP server."""
        if not self._metrics_server_started:
            start_http_server(port)
            self._metrics_server_started = True
    
    def record_login(self, outcome: str) -> None:
        """Record a login outcome: success, rejected, misconfigured or error."""
        login_requests.labels(outcome=outcome).inc()
    
    def record_upstream_request(self, endpoint: str, status: str) -> None:
        """Record request to the upstream backend."""
        upstream_requests.labels(endpoint=endpoint, status=status).inc()
    
    @contextmanager
    def time_upstream(self, endpoint: str):
        """Context manager for timing an upstream call, failed or not."""
        start_time = time.time()
        try:
            yield
        finally:
            upstream_request_duration.labels(endpoint=endpoint).observe(time.time() - start_time)


# Global metrics manager instance
metrics = MetricsManager()
