"""Feature flags module for centralized feature toggle management."""

from pydantic import BaseModel, Field

from flashdeck.config import get_settings


class FeatureFlags(BaseModel):
    """Pydantic model defining all feature flags in the application."""

    ai: bool = Field(..., description="Whether AI flashcard generation is available")


def get_feature_flags() -> FeatureFlags:
    """Get current feature flags based on application configuration."""
    settings = get_settings()
    return FeatureFlags(ai=settings.ai_enabled)
