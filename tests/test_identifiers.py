# =============================================================================
# tests/test_identifiers.py - Application Id & Timestamp Tests
# =============================================================================

import re
from datetime import datetime, timezone

from core.services.identifiers import format_submitted_at, generate_application_id


class TestGenerateApplicationId:

    def test_format(self):
        app_id = generate_application_id("HSMP-")

        assert re.match(r"^HSMP-\d{13}-[0-9A-F]{8}$", app_id)

    def test_custom_prefix(self):
        assert generate_application_id("APP-").startswith("APP-")

    def test_unique_in_tight_loop(self):
        """Many ids in the same millisecond still don't collide."""
        ids = {generate_application_id() for _ in range(1000)}

        assert len(ids) == 1000


class TestFormatSubmittedAt:

    def test_utc(self):
        moment = datetime(2026, 10, 19, 14, 30, 5, tzinfo=timezone.utc)

        assert format_submitted_at(moment, "UTC") == "10/19/2026, 02:30:05 PM UTC"

    def test_other_zone(self):
        moment = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)

        assert format_submitted_at(moment, "America/New_York") == "01/15/2026, 07:00:00 AM EST"

    def test_naive_treated_as_utc(self):
        moment = datetime(2026, 10, 19, 0, 0, 0)

        assert format_submitted_at(moment, "UTC") == "10/19/2026, 12:00:00 AM UTC"

    def test_defaults_to_now(self):
        assert format_submitted_at().endswith("UTC")
