from fastapi import APIRouter

from flashdeck.feature_flags import get_feature_flags
from flashdeck.infrastructure.common.schemas import AppSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("")
async def get_app_settings() -> AppSettingsResponse:
    """
    Get public application settings.

    This is a public endpoint that doesn't require authentication.
    """
    return AppSettingsResponse(feature_flags=get_feature_flags())
