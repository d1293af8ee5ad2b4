"""Prometheus metric definitions for the initiation service."""

from prometheus_client import Counter, Histogram, generate_latest
from starlette.responses import Response


payment_requests_total = Counter("payment_requests_total", "Total payment initiation requests", ["service"])
payment_initiated_total = Counter(
    "payment_initiated_total",
    "Payment initiations that produced a signed gateway payload",
    ["service"],
)
payment_failure_total = Counter(
    "payment_failure_total",
    "Payment initiations rejected or failed",
    ["service", "error_kind"],
)
payment_latency_seconds = Histogram("payment_latency_seconds", "Payment initiation latency seconds", ["service"])
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["service", "route", "method", "status_code"],
)
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration seconds",
    ["service", "route", "method"],
)


def metrics_response() -> Response:
    """Expose all registered Prometheus metrics in text format."""

    return Response(content=generate_latest(), media_type="text/plain")
