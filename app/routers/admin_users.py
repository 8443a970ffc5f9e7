# =============================================================================
# app/routers/admin_users.py - Admin User Checks
# =============================================================================
# Lets the admin "create user" form warn about duplicates before submitting:
# - GET /check-email?email=...
# - GET /check-phone?phone=...
#
# Mounted under /api/admin/users in main.py.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from app.dependencies import UserServiceDep
from core.models.user import ErrorResponse, ExistenceCheckResponse

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Required parameter missing"},
    500: {"model": ErrorResponse, "description": "User store lookup failed"},
}


@router.get(
    "/check-email",
    response_model=ExistenceCheckResponse,
    responses=ERROR_RESPONSES,
)
def check_email(
    service: UserServiceDep,
    email: Annotated[str | None, Query(description="Email address to look up")] = None,
) -> ExistenceCheckResponse:
    """
    Check whether a user with this email already exists.

    The comparison is case-insensitive.

    Returns:
        ExistenceCheckResponse: {"success": true, "exists": <bool>}

    Raises:
        400: If email is missing
        500: If the user store cannot be queried
    """
    exists = service.email_exists(email)
    return ExistenceCheckResponse(exists=exists)


@router.get(
    "/check-phone",
    response_model=ExistenceCheckResponse,
    responses=ERROR_RESPONSES,
)
def check_phone(
    service: UserServiceDep,
    phone: Annotated[str | None, Query(description="Phone number to look up")] = None,
) -> ExistenceCheckResponse:
    """
    Check whether a user with this phone number already exists.

    Raises:
        400: If phone is missing
        500: If the user store cannot be queried
    """
    exists = service.phone_exists(phone)
    return ExistenceCheckResponse(exists=exists)
