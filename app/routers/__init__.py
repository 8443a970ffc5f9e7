# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - admin_users.py: Email / phone existence checks for the admin dashboard
# - upload.py: Upload route diagnostics
# - health.py: Health check endpoints
# - pages.py: Server-rendered HTML pages
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import admin_users
from . import health
from . import pages
from . import upload

__all__ = [
    "admin_users",
    "health",
    "pages",
    "upload",
]
