# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the PreDelivery API:
# - test_user_service.py: Email / phone existence check logic
# - test_supabase_client.py: Supabase user store query building
# - test_admin_users.py: Admin check routes over HTTP
# - test_upload.py: Upload diagnostic routes
# - test_layout.py: Root page layout
# - test_health.py: Health check endpoints
# - test_config.py: Settings parsing
#
# Run tests with: pytest
# =============================================================================
