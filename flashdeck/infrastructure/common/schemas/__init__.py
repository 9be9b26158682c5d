"""Common infrastructure schemas."""

from flashdeck.infrastructure.common.schemas.response_wrappers import SuccessResponse
from flashdeck.infrastructure.common.schemas.settings_schemas import AppSettingsResponse

__all__ = [
    "AppSettingsResponse",
    "SuccessResponse",
]
