"""Environment-derived settings for logtape-otel.

Settings are loaded once from environment variables (with ``.env`` file
support via pydantic-settings) and frozen.

Environment variables:
    OTEL_SERVICE_NAME: Service name used by the default logger provider when
        no explicit ``service_name`` is passed to the sink.

Endpoint and header variables (``OTEL_EXPORTER_OTLP_*``) are read by the
OTLP exporter itself and are not parsed here.

Example:
    >>> from logtape_otel.settings import settings
    >>> print(settings.otel_service_name)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration consumed when the sink builds its own logger provider.

    Attributes:
        otel_service_name: Fallback ``service.name`` resource attribute.
                           Empty means "let the SDK decide".
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    otel_service_name: str = ""


settings = Settings()
"""Global settings instance, created at import."""
