# =============================================================================
# tests/test_supabase_client.py - Supabase User Store Tests
# =============================================================================
# The Supabase query builder is replaced with a MagicMock chain so we can
# check the exact query issued without a network.
# =============================================================================

import time
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock, patch

import pytest

from lib.supabase_client import SupabaseClient, SupabaseClientError, SupabaseUserStore


def make_client(rows=None, error=None):
    """Build a mock client whose table(...).select(...)... chain returns rows."""
    client = MagicMock()
    query = client.table.return_value
    query.select.return_value = query
    query.eq.return_value = query
    query.limit.return_value = query
    if error:
        query.execute.side_effect = error
    else:
        query.execute.return_value = MagicMock(data=rows)
    return client, query


class TestSupabaseUserStore:
    """Tests for SupabaseUserStore lookups."""

    def test_email_lookup_query(self):
        client, query = make_client(rows=[{"id": "user-1"}])
        store = SupabaseUserStore(client=client, table="users")

        assert store.find_user_id_by_email("jane@example.com") == "user-1"

        client.table.assert_called_once_with("users")
        query.select.assert_called_once_with("id")
        query.eq.assert_called_once_with("email", "jane@example.com")
        query.limit.assert_called_once_with(1)

    def test_phone_lookup_filters_phone_number_column(self):
        client, query = make_client(rows=[{"id": 42}])
        store = SupabaseUserStore(client=client)

        assert store.find_user_id_by_phone("+15551234567") == "42"
        query.eq.assert_called_once_with("phone_number", "+15551234567")

    @pytest.mark.parametrize("rows", [[], None, [{"email": "jane@example.com"}]])
    def test_no_usable_row_is_not_found(self, rows):
        client, _ = make_client(rows=rows)
        store = SupabaseUserStore(client=client)

        assert store.find_user_id_by_email("jane@example.com") is None

    def test_query_failure_is_wrapped(self):
        client, _ = make_client(error=RuntimeError("relation \"users\" does not exist"))
        store = SupabaseUserStore(client=client)

        with pytest.raises(SupabaseClientError) as exc_info:
            store.find_user_id_by_email("jane@example.com")

        assert exc_info.value.code == "FETCH_USER_FAILED"
        assert exc_info.value.message == 'relation "users" does not exist'

    def test_check_connection_failure_is_wrapped(self):
        client, _ = make_client(error=ConnectionError("timed out"))
        store = SupabaseUserStore(client=client)

        with pytest.raises(SupabaseClientError) as exc_info:
            store.check_connection()

        assert exc_info.value.code == "CONNECTION_CHECK_FAILED"


class TestSupabaseClient:
    """Tests for the lazily created client singleton."""

    def setup_method(self):
        SupabaseClient.reset()

    def teardown_method(self):
        SupabaseClient.reset()

    def test_missing_credentials(self):
        with patch("lib.supabase_client.settings") as mock_settings:
            mock_settings.SUPABASE_URL = None
            mock_settings.SUPABASE_SERVICE_KEY = None

            with pytest.raises(SupabaseClientError) as exc_info:
                SupabaseClient.get_client()

        assert exc_info.value.code == "CLIENT_NOT_CONFIGURED"

    def test_client_created_once(self):
        with patch("lib.supabase_client.settings") as mock_settings, \
                patch("lib.supabase_client.create_client") as mock_create:
            mock_settings.SUPABASE_URL = "https://test-project.supabase.co"
            mock_settings.SUPABASE_SERVICE_KEY = "test-service-key"
            first = SupabaseClient.get_client()
            second = SupabaseClient.get_client()

        assert first is second
        mock_create.assert_called_once_with(
            "https://test-project.supabase.co", "test-service-key"
        )

    def test_store_surfaces_missing_credentials_on_lookup(self):
        with patch("lib.supabase_client.settings") as mock_settings:
            mock_settings.SUPABASE_URL = None
            mock_settings.SUPABASE_SERVICE_KEY = None

            store = SupabaseUserStore(table="users")
            with pytest.raises(SupabaseClientError) as exc_info:
                store.find_user_id_by_email("jane@example.com")

        assert exc_info.value.message == "Supabase is not configured"

    def test_concurrent_first_use_creates_one_client(self):
        def slow_create(url, key):
            time.sleep(0.05)
            return MagicMock()

        with patch("lib.supabase_client.settings") as mock_settings, \
                patch("lib.supabase_client.create_client", side_effect=slow_create) as mock_create:
            mock_settings.SUPABASE_URL = "https://test-project.supabase.co"
            mock_settings.SUPABASE_SERVICE_KEY = "test-service-key"

            with ThreadPoolExecutor(max_workers=8) as pool:
                clients = list(pool.map(lambda _: SupabaseClient.get_client(), range(8)))

        assert mock_create.call_count == 1
        assert all(client is clients[0] for client in clients)
