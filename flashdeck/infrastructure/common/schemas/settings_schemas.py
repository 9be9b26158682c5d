from pydantic import BaseModel, Field

from flashdeck.feature_flags import FeatureFlags


class AppSettingsResponse(BaseModel):
    """Schema for returning public application settings."""

    feature_flags: FeatureFlags = Field(..., description="All feature flags")
