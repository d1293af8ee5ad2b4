"""Environment-driven settings for the payment initiation service.

The process loads this once at startup (see `.env.example`). The orchestrator
receives an `EsewaSettings` instance explicitly, so tests can build their own.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class EsewaSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "payment-initiation"
    log_level: str = "INFO"
    public_url: str = ""
    esewa_base_url: str = ""
    esewa_secret_key: SecretStr | None = None
    esewa_merchant_id: str = ""
    otel_exporter_otlp_endpoint: str | None = None
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = EsewaSettings()
