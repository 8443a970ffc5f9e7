# =============================================================================
# tests/test_user_service.py - User Existence Check Tests
# =============================================================================
# Unit tests for UserService against the in-memory store:
#   - Case-insensitive email matching
#   - Missing input rejected before any lookup
#   - Store failures converted to UserLookupError
#
# Run with: pytest tests/test_user_service.py -v
# =============================================================================

import pytest

from app.exceptions import MissingParameterError, UserLookupError
from core.services.user_service import UserService
from lib.supabase_client import SupabaseClientError
from tests.conftest import FakeUserStore


@pytest.fixture
def service(user_store):
    return UserService(user_store)


# =============================================================================
# Email Checks
# =============================================================================

class TestEmailExists:
    """Tests for UserService.email_exists."""

    def test_existing_email(self, service):
        assert service.email_exists("jane.doe@example.com") is True

    def test_unknown_email(self, service):
        assert service.email_exists("nobody@example.com") is False

    @pytest.mark.parametrize(
        "variant",
        ["jane.doe@example.com", "JANE.DOE@EXAMPLE.COM", "Jane.Doe@Example.com"],
    )
    def test_case_variants_give_same_answer(self, service, variant):
        assert service.email_exists(variant) is True

    def test_email_is_lowercased_before_lookup(self, service, user_store):
        service.email_exists("Tech@PreDelivery.App")
        assert user_store.calls == [("email", "tech@predelivery.app")]

    @pytest.mark.parametrize("email", [None, ""])
    def test_missing_email_rejected_without_lookup(self, service, user_store, email):
        with pytest.raises(MissingParameterError) as exc_info:
            service.email_exists(email)

        assert exc_info.value.message == "Email is required"
        assert exc_info.value.status_code == 400
        assert user_store.calls == []

    def test_store_error_message_is_surfaced(self):
        store = FakeUserStore(error=SupabaseClientError("connection refused"))

        with pytest.raises(UserLookupError) as exc_info:
            UserService(store).email_exists("jane.doe@example.com")

        assert exc_info.value.message == "connection refused"
        assert exc_info.value.status_code == 500

    def test_store_error_without_message_uses_fallback(self):
        store = FakeUserStore(error=RuntimeError())

        with pytest.raises(UserLookupError) as exc_info:
            UserService(store).email_exists("jane.doe@example.com")

        assert exc_info.value.message == "Failed to check email"


# =============================================================================
# Phone Checks
# =============================================================================

class TestPhoneExists:
    """Tests for UserService.phone_exists."""

    def test_existing_phone(self, service):
        assert service.phone_exists("+15551234567") is True

    def test_surrounding_whitespace_ignored(self, service, user_store):
        assert service.phone_exists("  0412 345 678 ") is True
        assert user_store.calls == [("phone_number", "0412 345 678")]

    def test_unknown_phone(self, service):
        assert service.phone_exists("+15550000000") is False

    def test_missing_phone_rejected_without_lookup(self, service, user_store):
        with pytest.raises(MissingParameterError) as exc_info:
            service.phone_exists(None)

        assert exc_info.value.message == "Phone number is required"
        assert user_store.calls == []

    def test_store_error_without_message_uses_fallback(self):
        store = FakeUserStore(error=SupabaseClientError(""))

        with pytest.raises(UserLookupError) as exc_info:
            UserService(store).phone_exists("+15551234567")

        assert exc_info.value.message == "Failed to check phone number"
