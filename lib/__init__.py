# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Supabase client singleton and user store
# - utils.py: Shared utilities (contact normalization, timestamps)
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError, SupabaseUserStore
from lib.utils import mask_contact, normalize_email, normalize_phone, utc_timestamp

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    "SupabaseUserStore",
    # Utils
    "mask_contact",
    "normalize_email",
    "normalize_phone",
    "utc_timestamp",
]
