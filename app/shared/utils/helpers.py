# 📄 File: app/shared/utils/helpers.py

# 🧭 Purpose (Layman Explanation):
# Small helpful tools for working with dates that many parts of the app share,
# like "what time is it right now" and "when is three days from now".

# 🧪 Purpose (Technical Summary):
# Timezone-aware timestamp helpers used by domain models and repository mappers.

# 🔗 Dependencies:
# - datetime: Timestamp handling
# - typing: Type hints

# 🔄 Connected Modules / Calls From:
# Used by: Domain models (timestamps), repository implementations (UTC normalisation),
# task generation (due dates)

from datetime import datetime, timedelta, timezone
from typing import Optional


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Attach UTC to naive datetimes and convert aware ones to UTC.

    Some backends (SQLite) hand timestamps back without tzinfo even
    though they were stored as UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def hours_from_now(hours: int, now: Optional[datetime] = None) -> datetime:
    return (now or utc_now()) + timedelta(hours=hours)

