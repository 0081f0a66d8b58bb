from fastapi import APIRouter

from noteswise.feature_flags import get_feature_flags
from noteswise.infrastructure.common.schemas import AppSettingsResponse

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=AppSettingsResponse)
def get_app_settings() -> AppSettingsResponse:
    """
    Get public application settings.

    Tells clients which optional features (AI, audio) this server offers.
    This is a public endpoint that doesn't require authentication.
    """
    return AppSettingsResponse(feature_flags=get_feature_flags())
