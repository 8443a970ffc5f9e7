# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: Existence check and error envelope schemas
# - diagnostics.py: Runtime environment and upload diagnostic schemas
# - page.py: Metadata shared by every rendered page
#
# These models define the "contract" between API and clients.
# =============================================================================

from .diagnostics import RuntimeEnvironment, UploadPostResponse, UploadTestResponse
from .page import PageMetadata
from .user import ErrorResponse, ExistenceCheckResponse

__all__ = [
    # Diagnostics
    "RuntimeEnvironment",
    "UploadPostResponse",
    "UploadTestResponse",
    # Pages
    "PageMetadata",
    # Users
    "ErrorResponse",
    "ExistenceCheckResponse",
]
