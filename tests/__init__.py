# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the application intake API:
# - test_models.py: Pydantic model and settings validation
# - test_identifiers.py: Application id and timestamp generation
# - test_email_renderer.py: Admin notification and confirmation content
# - test_email_client.py: SendGrid client against a mock transport
# - test_application_service.py: Intake sequence with a mocked client
# - test_applications_api.py: HTTP tests for every endpoint
#
# Run tests with: pytest
# =============================================================================
