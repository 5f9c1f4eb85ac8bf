# portfolio/core/metrics.py
from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from typing import Callable
import time

# Request metrics are labelled by route template ("/api/v1/skills/{entity_id}"),
# never by raw path, so ids and uploaded file names do not create new series.
http_requests_total = Counter(
    'http_requests_total',
    'HTTP requests by route and status',
    ['method', 'route', 'status']
)

http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request latency in seconds',
    ['method', 'route'],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)
)

http_requests_in_progress = Gauge(
    'http_requests_in_progress',
    'HTTP requests currently being handled',
    ['method']
)

db_errors_total = Counter(
    'db_errors_total',
    'Database statements that raised',
    ['table', 'operation']
)

portfolio_fetch_failures_total = Counter(
    'portfolio_fetch_failures_total',
    'Portfolio sections replaced by an empty value after a failed read',
    ['section']
)

uploads_total = Counter(
    'uploads_total',
    'Image uploads by outcome',
    ['result']
)

UNMATCHED_ROUTE = "<unmatched>"
SKIPPED_PATHS = {"/metrics", "/health"}


def route_template(request: Request) -> str:
    """Path template of the route that handled ``request``; the router records it in the scope."""
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE)


class PrometheusMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        method = request.method
        http_requests_in_progress.labels(method=method).inc()
        started = time.perf_counter()
        status = 500

        try:
            response = await call_next(request)
            status = response.status_code
            return response
        finally:
            # Only known once the router has dispatched
            route = route_template(request)
            http_requests_total.labels(method=method, route=route, status=status).inc()
            http_request_duration_seconds.labels(method=method, route=route).observe(
                time.perf_counter() - started
            )
            http_requests_in_progress.labels(method=method).dec()


def metrics_endpoint() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
