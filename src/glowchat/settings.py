"""Client configuration.

Centralizes the values the CLI reads from the environment so commands do
not parse environment variables themselves.
"""

import os
from collections.abc import Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from .log import LogLevel

ENV_WORKER_URL = "GLOWCHAT_WORKER_URL"
ENV_TIMEOUT = "GLOWCHAT_TIMEOUT"
ENV_LOG_LEVEL = "GLOWCHAT_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "warning"


class ConfigurationError(ValueError):
    """Settings are missing or invalid."""


class ClientSettings(BaseModel):
    """Validated client settings."""

    worker_url: str = Field(description="Completion worker endpoint")
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Transport timeout in seconds (None keeps the httpx default)"
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="debug, info, warning or error")

    @field_validator("worker_url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        value = value.strip()
        if not value.startswith(("http://", "https://")):
            raise ValueError("worker URL must start with http:// or https://")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in LogLevel.choices():
            raise ValueError(f"log level must be one of {', '.join(LogLevel.choices())}")
        return value

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object
    ) -> "ClientSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)
            **overrides: Explicit values (e.g. CLI options); None is ignored

        Returns:
            Validated settings

        Raises:
            ConfigurationError: If the worker URL is unset or a value is invalid

        Environment variables:
            GLOWCHAT_WORKER_URL: Worker endpoint (required)
            GLOWCHAT_TIMEOUT: Transport timeout in seconds
            GLOWCHAT_LOG_LEVEL: Log level (default: warning)
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {
            "worker_url": env.get(ENV_WORKER_URL),
            "timeout": env.get(ENV_TIMEOUT) or None,
            "log_level": env.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        if not values["worker_url"]:
            raise ConfigurationError(f"{ENV_WORKER_URL} not set in environment")

        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
