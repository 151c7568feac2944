"""Configuration management using pydantic-settings."""
import logging
import sys
from functools import lru_cache
from typing import Any, Literal, Optional

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings prefixed with CSV2XLSX_ (e.g., CSV2XLSX_MAX_WORKERS=4)
    """

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Logging level"
    )
    environment: Literal["development", "production"] = Field(
        default="development",
        description="development renders console logs, production renders JSON",
    )

    # Reader defaults
    default_delimiter: str = Field(
        default=",",
        min_length=1,
        max_length=1,
        description="Field delimiter used when none is given",
    )
    encoding: str = Field(default="utf-8", description="Source file encoding")
    input_extension: str = Field(
        default=".csv",
        min_length=2,
        description="Recognized extension for delimited text inputs",
    )

    # Type inference
    inference_sample_rows: int = Field(
        default=20,
        ge=1,
        le=10000,
        description="Number of leading rows inspected when inferring column types",
    )

    # Concurrency
    max_workers: int = Field(
        default=8,
        ge=1,
        le=64,
        description="Upper bound on concurrent file reads during merge",
    )

    # Output
    default_sheet_name: str = Field(
        default="Sheet1",
        min_length=1,
        max_length=31,
        description="Worksheet name used in generated workbooks",
    )

    model_config = SettingsConfigDict(
        env_prefix="CSV2XLSX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog for console or JSON logging.

    Logs go to stderr so they never mix with the CLI's own output.
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    shared_processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_production:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
