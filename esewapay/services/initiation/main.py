"""HTTP surface for eSewa payment initiation and its landing pages."""

from time import perf_counter
from uuid import uuid4

from fastapi import Depends, FastAPI, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from esewapay.common.config import settings
from esewapay.common.logging import configure_logging, logger, trace_id_ctx
from esewapay.common.metrics import (
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
    payment_failure_total,
    payment_initiated_total,
    payment_latency_seconds,
    payment_requests_total,
)
from esewapay.common.startup import log_startup_config
from esewapay.common.tracing import instrument_app, setup_tracing
from esewapay.services.initiation.pages import FAILURE_PAGE, SUCCESS_PAGE
from esewapay.services.initiation.schemas import ErrorResponse, InitiationResult, PaymentInitiationRequest
from esewapay.services.initiation.service import DEFAULT_FAILURE_MESSAGE, PaymentInitiationService

configure_logging()
setup_tracing(settings.service_name, settings.otel_exporter_otlp_endpoint)
log_startup_config(
    settings,
    [
        "log_level",
        "public_url",
        "esewa_base_url",
        "esewa_merchant_id",
        "esewa_secret_key",
        "otel_exporter_otlp_endpoint",
    ],
)
service = PaymentInitiationService(settings)

STATUS_BY_KIND = {"validation": 400, "configuration": 500, "unexpected": 500}

app = FastAPI(title="eSewa Payment Initiation")
instrument_app(app)


def get_service() -> PaymentInitiationService:
    return service


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Record request count and latency for every HTTP call."""

    start = perf_counter()
    route = request.url.path
    method = request.method
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        route_obj = request.scope.get("route")
        if route_obj is not None and getattr(route_obj, "path", None):
            route = route_obj.path
        return response
    finally:
        elapsed = max(0.0, perf_counter() - start)
        http_request_duration_seconds.labels(
            service=settings.service_name,
            route=route,
            method=method,
        ).observe(elapsed)
        http_requests_total.labels(
            service=settings.service_name,
            route=route,
            method=method,
            status_code=str(status_code),
        ).inc()


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(_: Request, exc: RequestValidationError):
    """Map body errors onto initiation results.

    Malformed JSON is an unexpected failure; well-formed JSON that is not an
    object carries none of the required fields.
    """

    errors = exc.errors()
    decode_error = next((err for err in errors if err.get("type") == "json_invalid"), None)
    if decode_error is not None:
        logger.error("request body is not valid JSON: %s", decode_error.get("msg"))
        result = InitiationResult.failure("unexpected", decode_error.get("msg") or DEFAULT_FAILURE_MESSAGE)
    else:
        logger.info("request body is not a JSON object: %s", errors)
        result = InitiationResult.failure("validation", "Missing required fields")
    payment_failure_total.labels(service=settings.service_name, error_kind=result.error.kind).inc()
    return to_http(result)


def to_http(result: InitiationResult) -> JSONResponse:
    """Translate an initiation result into a transport-level response."""

    if result.ok:
        return JSONResponse(status_code=200, content=result.response.model_dump(by_alias=True))
    return JSONResponse(
        status_code=STATUS_BY_KIND[result.error.kind],
        content=ErrorResponse(error=result.error.message).model_dump(),
    )


@app.post("/api/payment/initiate")
def initiate_payment(
    req: PaymentInitiationRequest,
    x_correlation_id: str | None = Header(default=None),
    initiation: PaymentInitiationService = Depends(get_service),
):
    """Compute amounts, sign the eSewa message and return the redirect payload."""

    trace_id_ctx.set(x_correlation_id or str(uuid4()))
    payment_requests_total.labels(service=settings.service_name).inc()
    with payment_latency_seconds.labels(service=settings.service_name).time():
        result = initiation.initiate(req)
    if result.ok:
        payment_initiated_total.labels(service=settings.service_name).inc()
    else:
        payment_failure_total.labels(service=settings.service_name, error_kind=result.error.kind).inc()
    return to_http(result)


@app.get("/success", response_class=HTMLResponse)
def success_page():
    """Landing page eSewa redirects to after a completed payment."""

    return SUCCESS_PAGE


@app.get("/failure", response_class=HTMLResponse)
def failure_page():
    """Landing page eSewa redirects to after a failed or cancelled payment."""

    return FAILURE_PAGE


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}
