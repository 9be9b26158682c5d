"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./flashdeck.db"

    # Shared secret with the identity provider for HS256 bearer tokens
    SECRET_KEY: str = ""
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "flashdeck API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = True
    AI_GENERATION_RATE_LIMIT: str = "10/minute"

    # AI configuration
    AI_PROVIDER: (
        Literal["ollama"] | Literal["openai"] | Literal["anthropic"] | Literal["google"] | None
    ) = None
    AI_MODEL_NAME: str | None = None

    # ollama
    OPENAI_BASE_URL: str | None = None
    # openai
    OPENAI_API_KEY: str | None = None
    # anthropic
    ANTHROPIC_API_KEY: str | None = None
    # google
    GEMINI_API_KEY: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ai_enabled(self) -> bool:
        """Whether AI features are enabled."""
        return self.AI_PROVIDER is not None

    @model_validator(mode="after")
    def validate_secret_key(self) -> "Settings":
        """Require a signing secret outside the test environment."""
        if not self.SECRET_KEY and self.ENVIRONMENT != "test":
            msg = "SECRET_KEY is required unless ENVIRONMENT is 'test'"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def validate_ai_provider_config(self) -> "Settings":
        """Validate AI provider configuration."""
        if self.AI_PROVIDER is not None and self.AI_MODEL_NAME is None:
            msg = f"AI_MODEL_NAME is required when AI_PROVIDER is '{self.AI_PROVIDER}'"
            raise ValueError(msg)

        if self.AI_PROVIDER == "ollama" and not self.OPENAI_BASE_URL:
            msg = "OPENAI_BASE_URL is required when AI_PROVIDER is 'ollama'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "openai" and not self.OPENAI_API_KEY:
            msg = "OPENAI_API_KEY is required when AI_PROVIDER is 'openai'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "anthropic" and not self.ANTHROPIC_API_KEY:
            msg = "ANTHROPIC_API_KEY is required when AI_PROVIDER is 'anthropic'"
            raise ValueError(msg)
        if self.AI_PROVIDER == "google" and not self.GEMINI_API_KEY:
            msg = "GEMINI_API_KEY is required when AI_PROVIDER is 'google'"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
