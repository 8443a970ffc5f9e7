# =============================================================================
# core/models/page.py - Page Metadata
# =============================================================================
# Document-level metadata declared once for every rendered page.
# =============================================================================

from pydantic import BaseModel, ConfigDict


class PageMetadata(BaseModel):
    """Language, title and description shared by every page."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    lang: str = "en"

    @classmethod
    def from_settings(cls, settings) -> "PageMetadata":
        return cls(title=settings.APP_NAME, description=settings.APP_DESCRIPTION)
