# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the intake logic:
# - models/: Pydantic schemas for applications and outbound email
# - services/: Intake sequence, email rendering, id/timestamp generation
#
# Code in this package should NOT import from FastAPI routers.
# This keeps the logic testable with a fake email client.
# =============================================================================
