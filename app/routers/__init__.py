# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoint
# - applications.py: Application submission endpoint
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import applications
from . import health

__all__ = [
    "applications",
    "health",
]
