# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and a user store that answers point lookups against the users table:
# - User ID by email
# - User ID by phone number
#
# Only the `id` column is ever selected; this code never writes users.
#
# Usage:
#   from lib.supabase_client import SupabaseUserStore
#   user_id = SupabaseUserStore().find_user_id_by_email("jane@example.com")
# =============================================================================

from __future__ import annotations

import logging
import threading
from supabase import create_client, Client

from app.config import settings
from lib.utils import mask_contact

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries a machine-readable code and, where possible, a suggestion
    on how to fix the problem.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Process-wide holder for the Supabase client.

    The client is created on first use, not at import, so the application
    starts even when Supabase credentials are absent.
    """

    _instance: Client | None = None
    _lock = threading.Lock()

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If credentials are missing or creation fails
        """
        if cls._instance is not None:
            return cls._instance

        with cls._lock:
            if cls._instance is not None:
                return cls._instance
            if not settings.SUPABASE_URL or not settings.SUPABASE_SERVICE_KEY:
                raise SupabaseClientError(
                    message="Supabase is not configured",
                    code="CLIENT_NOT_CONFIGURED",
                    suggestion="Set SUPABASE_URL and SUPABASE_SERVICE_KEY in your environment or .env file",
                )
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used by tests)."""
        cls._instance = None


class SupabaseUserStore:
    """
    Read-only user lookups backed by the Supabase users table.

    Example:
        store = SupabaseUserStore()
        if store.find_user_id_by_email("jane@example.com"):
            ...
    """

    def __init__(self, client: Client | None = None, table: str | None = None):
        self._client = client
        self.table = table or settings.USERS_TABLE

    @property
    def client(self) -> Client:
        if self._client is None:
            self._client = SupabaseClient.get_client()
        return self._client

    def find_user_id_by_email(self, email: str) -> str | None:
        """
        Return the ID of the user with exactly this email, or None.

        The caller is responsible for normalizing the email first.

        Raises:
            SupabaseClientError: If the query fails
        """
        return self._find_user_id("email", email)

    def find_user_id_by_phone(self, phone: str) -> str | None:
        """Return the ID of the user with exactly this phone number, or None."""
        return self._find_user_id("phone_number", phone)

    def check_connection(self) -> None:
        """
        Run a one-row probe query against the users table.

        Raises:
            SupabaseClientError: If the table cannot be queried
        """
        try:
            self.client.table(self.table).select("id").limit(1).execute()
        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=str(e),
                code="CONNECTION_CHECK_FAILED",
                suggestion=f"Check that the {self.table} table exists and is reachable",
            ) from e

    def _find_user_id(self, column: str, value: str) -> str | None:
        try:
            response = (
                self.client.table(self.table)
                .select("id")
                .eq(column, value)
                .limit(1)
                .execute()
            )
        except SupabaseClientError:
            raise
        except Exception as e:
            logger.error(f"User lookup by {column} failed: {e}")
            raise SupabaseClientError(
                message=str(e),
                code="FETCH_USER_FAILED",
                suggestion=f"Check that the {self.table} table is accessible",
            ) from e

        rows = response.data or []
        logger.debug(f"Lookup {column}={mask_contact(value)} returned {len(rows)} row(s)")
        if not rows:
            return None

        # A row without an id counts as not found
        user_id = rows[0].get("id")
        return str(user_id) if user_id is not None else None
