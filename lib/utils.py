# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from datetime import datetime, timezone


# =============================================================================
# Contact Normalization
# =============================================================================

def normalize_email(email: str) -> str:
    """
    Normalize an email address for lookups.

    Emails are stored lowercased, so the comparison is case-insensitive
    regardless of how the caller typed the address.

    Example:
        normalize_email("Jane.Doe@Example.COM")  # "jane.doe@example.com"
    """
    return email.lower()


def normalize_phone(phone: str) -> str:
    """Strip surrounding whitespace from a phone number."""
    return phone.strip()


def mask_contact(value: str) -> str:
    """
    Mask an email or phone number for log output.

    Keeps the first character and the domain (for emails) or the last two
    digits (for phone numbers).

    Example:
        mask_contact("jane@example.com")  # "j***@example.com"
        mask_contact("+15551234567")      # "***67"
    """
    if "@" in value:
        local, _, domain = value.partition("@")
        return f"{local[:1]}***@{domain}"
    return f"***{value[-2:]}" if len(value) > 2 else "***"


# =============================================================================
# Timestamps
# =============================================================================

def utc_timestamp() -> str:
    """
    Current UTC time as an ISO-8601 string with millisecond precision.

    Example:
        utc_timestamp()  # "2024-01-15T10:30:00.123Z"
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
