# =============================================================================
# core/services/user_service.py - User Existence Checks
# =============================================================================
# Answers "is this email / phone number already registered?" for the admin
# user-management screens. Separates HTTP concerns from the database lookup.
#
# The store is passed in, so any object with the UserStore methods works
# (the Supabase-backed store in production, an in-memory fake in tests).
# =============================================================================

import logging
from typing import Protocol

from lib.supabase_client import SupabaseClientError
from lib.utils import mask_contact, normalize_email, normalize_phone
from app.exceptions import MissingParameterError, UserLookupError

logger = logging.getLogger(__name__)

EMAIL_REQUIRED = "Email is required"
EMAIL_CHECK_FAILED = "Failed to check email"
PHONE_REQUIRED = "Phone number is required"
PHONE_CHECK_FAILED = "Failed to check phone number"


class UserStore(Protocol):
    """Read-only point lookups against the user records."""

    def find_user_id_by_email(self, email: str) -> str | None: ...

    def find_user_id_by_phone(self, phone: str) -> str | None: ...

    def check_connection(self) -> None: ...


class UserService:
    """
    Service for user existence checks.

    Each check has two outcomes: a boolean, or a UserLookupError carrying
    the underlying message (or a fixed fallback when there is none).
    A missing record is never an error.
    """

    def __init__(self, store: UserStore):
        self.store = store

    def email_exists(self, email: str | None) -> bool:
        """
        Check whether a user with this email exists (case-insensitive).

        Args:
            email: Raw email from the request; None or "" is rejected

        Raises:
            MissingParameterError: If email is missing, before any lookup
            UserLookupError: If the store fails
        """
        if not email:
            raise MissingParameterError("email", EMAIL_REQUIRED)

        normalized = normalize_email(email)
        try:
            user_id = self.store.find_user_id_by_email(normalized)
        except Exception as e:
            logger.error(f"Email check failed for {mask_contact(normalized)}: {e}")
            raise UserLookupError(_error_message(e, EMAIL_CHECK_FAILED), lookup="email") from e

        return user_id is not None

    def phone_exists(self, phone: str | None) -> bool:
        """
        Check whether a user with this phone number exists.

        Surrounding whitespace is ignored; no other normalization is applied.
        """
        if not phone:
            raise MissingParameterError("phone", PHONE_REQUIRED)

        normalized = normalize_phone(phone)
        try:
            user_id = self.store.find_user_id_by_phone(normalized)
        except Exception as e:
            logger.error(f"Phone check failed for {mask_contact(normalized)}: {e}")
            raise UserLookupError(_error_message(e, PHONE_CHECK_FAILED), lookup="phone") from e

        return user_id is not None


def _error_message(error: Exception, fallback: str) -> str:
    """Message of the underlying error, or the fallback when it has none."""
    if isinstance(error, SupabaseClientError):
        return error.message or fallback
    return str(error) or fallback
