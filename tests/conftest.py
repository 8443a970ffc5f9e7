# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory user store and a TestClient wired to it
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_user_store
from app.main import app


class FakeUserStore:
    """
    In-memory stand-in for the Supabase user store.

    Matches emails and phone numbers exactly, like the database filter does,
    and records every lookup so tests can assert on the calls made.
    """

    def __init__(self, users=None, error=None):
        self.users = users or []
        self.error = error
        self.calls = []

    def find_user_id_by_email(self, email):
        return self._find("email", email)

    def find_user_id_by_phone(self, phone):
        return self._find("phone_number", phone)

    def check_connection(self):
        self.calls.append(("check_connection", None))
        if self.error:
            raise self.error

    def _find(self, column, value):
        self.calls.append((column, value))
        if self.error:
            raise self.error
        for user in self.users:
            if user.get(column) == value:
                return user["id"]
        return None


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_users():
    """User rows as stored in the users table (emails lowercased)."""
    return [
        {
            "id": "3f2b8c1e-0000-4000-8000-000000000001",
            "email": "jane.doe@example.com",
            "phone_number": "+15551234567",
        },
        {
            "id": "3f2b8c1e-0000-4000-8000-000000000002",
            "email": "tech@predelivery.app",
            "phone_number": "0412 345 678",
        },
    ]


@pytest.fixture
def user_store(sample_users):
    return FakeUserStore(users=sample_users)


@pytest.fixture
def client(user_store):
    """TestClient whose user store is the in-memory fake."""
    app.dependency_overrides[get_user_store] = lambda: user_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
