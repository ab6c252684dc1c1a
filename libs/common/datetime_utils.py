"""Timestamp helpers.

Every stored timestamp (order creation, cancellation, approvals, audit
entries) is timezone-aware UTC.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime; used as the column default."""
    return datetime.now(timezone.utc)
