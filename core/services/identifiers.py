# =============================================================================
# core/services/identifiers.py - Application Id & Timestamp
# =============================================================================
# Application ids look like:  HSMP-1760899200000-3FA2C1D4
#   prefix + unix milliseconds + "-" + 8 random hex chars
# The random tail keeps two submissions in the same millisecond distinct
# without any counter shared between requests.
# =============================================================================

import time
from datetime import datetime, timezone
from uuid import uuid4
from zoneinfo import ZoneInfo

DEFAULT_PREFIX = "HSMP-"

# en-US style, e.g. "10/19/2026, 02:30:05 PM UTC"
SUBMITTED_AT_FORMAT = "%m/%d/%Y, %I:%M:%S %p %Z"


def generate_application_id(prefix: str = DEFAULT_PREFIX) -> str:
    """
    Generate an opaque, unique application id.

    Args:
        prefix: Fixed prefix (configured via APPLICATION_ID_PREFIX)

    Returns:
        e.g. "HSMP-1760899200000-3FA2C1D4"
    """
    millis = time.time_ns() // 1_000_000
    return f"{prefix}{millis}-{uuid4().hex[:8].upper()}"


def format_submitted_at(now: datetime | None = None, tz_name: str = "UTC") -> str:
    """
    Format the submission time for people reading the emails.

    Both emails and the API response use the same string.

    Args:
        now: Moment to format (default: current time). Naive values are UTC.
        tz_name: IANA zone to display in

    Returns:
        e.g. "10/19/2026, 02:30:05 PM UTC"
    """
    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(ZoneInfo(tz_name)).strftime(SUBMITTED_AT_FORMAT)
