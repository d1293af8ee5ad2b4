"""Startup-time helper for safe config logging."""

from pydantic import SecretStr

from esewapay.common.config import EsewaSettings
from esewapay.common.logging import logger


SECRET_MARKERS = ("KEY", "SECRET", "PASSWORD", "TOKEN")


def safe_config(config: EsewaSettings, fields: list[str]) -> dict[str, str]:
    """Return selected settings by env-style name, redacting secret-like ones."""

    out = {}
    for field in fields:
        name = field.upper()
        value = getattr(config, field, None)
        if value is None or value == "":
            out[name] = "<unset>"
        elif isinstance(value, SecretStr) or any(marker in name for marker in SECRET_MARKERS):
            out[name] = "<redacted>"
        else:
            out[name] = str(value)
    return out


def log_startup_config(config: EsewaSettings, fields: list[str]) -> None:
    """Log selected startup config keys for quick troubleshooting."""

    summary = {"service": config.service_name, **safe_config(config, fields)}
    logger.info("startup_config=%s", summary)
