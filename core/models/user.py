# =============================================================================
# core/models/user.py - User Lookup Schemas
# =============================================================================
# These models define the API contract for the admin user checks:
# - ExistenceCheckResponse: result of an email/phone existence check
# - ErrorResponse: the error envelope shared by every failing route
#
# User records themselves live in the external users table; this code only
# ever learns whether one exists.
# =============================================================================

from pydantic import BaseModel, Field


class ExistenceCheckResponse(BaseModel):
    """
    Result of a user existence check.

    Example:
        {"success": true, "exists": false}
    """

    success: bool = True
    exists: bool = Field(
        ...,
        description="True if a user with this email/phone is already registered"
    )


class ErrorResponse(BaseModel):
    """
    Error envelope returned by failing requests.

    Example:
        {"success": false, "error": "Email is required"}
    """

    success: bool = False
    error: str
