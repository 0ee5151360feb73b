"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API, also used for the release tag.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix under which every calculator route is mounted.
        host: Interface the CLI binds the server to.
        port: Port the CLI binds the server to.
        cors_allow_origins: Origins allowed by the CORS middleware.
        sentry_dsn: Sentry project DSN. Telemetry falls back to an in-memory
            sink when unset, unless ``sentry_required`` is True.
        sentry_environment: Environment name reported with every Sentry event.
        sentry_required: Refuse to start without a Sentry DSN.
        telemetry_buffer_size: Capacity of the in-memory fallback sink.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "calc-api"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v0"
    host: str = "127.0.0.1"
    port: int = 9999
    cors_allow_origins: list[str] = ["*"]

    sentry_dsn: Optional[str] = None
    sentry_environment: str = "development"
    sentry_required: bool = False
    telemetry_buffer_size: int = 1000

    @property
    def release(self) -> str:
        """Release identifier in the ``name@version`` form Sentry expects."""
        return f"{self.project_name}@{self.version}"


settings = Settings()
