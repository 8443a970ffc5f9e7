# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the routes:
# - models/: Pydantic schemas for requests, responses and page metadata
# - services/: User existence checks
# =============================================================================
