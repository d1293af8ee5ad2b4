"""Structured JSON logging with request context fields."""

import logging
import sys
from contextvars import ContextVar

from pythonjsonlogger.json import JsonFormatter

from esewapay.common.config import settings


trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="")
transaction_uuid_ctx: ContextVar[str] = ContextVar("transaction_uuid", default="")

LOG_FORMAT = "%(asctime)s %(levelname)s %(service_name)s %(trace_id)s %(transaction_uuid)s %(message)s"


class ContextFilter(logging.Filter):
    """Inject service and correlation identifiers into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.service_name = settings.service_name
        record.trace_id = trace_id_ctx.get()
        record.transaction_uuid = transaction_uuid_ctx.get()
        return True


def configure_logging() -> None:
    """Configure root logger once per service process."""

    handler = logging.StreamHandler(sys.stdout)
    context_filter = ContextFilter()
    handler.addFilter(context_filter)
    formatter = JsonFormatter(LOG_FORMAT)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(settings.log_level)
    root.addFilter(context_filter)


logger = logging.getLogger("esewapay")
