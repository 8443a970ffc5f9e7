# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService, UserStore

__all__ = [
    "UserService",
    "UserStore",
]
