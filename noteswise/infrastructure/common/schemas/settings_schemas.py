from pydantic import Field

from noteswise.feature_flags import FeatureFlags
from noteswise.infrastructure.common.schemas.base import CamelModel


class AppSettingsResponse(CamelModel):
    """Schema for returning public application settings."""

    feature_flags: FeatureFlags = Field(..., description="All feature flags")
