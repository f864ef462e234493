# 📄 File: domca/shared/utils/dates.py
# 🧭 Purpose (Layman Explanation):
# Keeps every stored time in one shared clock (UTC) so that records made in
# different places can be compared safely.
# 🧪 Purpose (Technical Summary):
# UTC normalization and calendar-window helpers. Aware datetimes are converted,
# naive datetimes are tagged as UTC without shifting their clock value.
# 🔗 Dependencies:
# datetime, typing
# 🔄 Connected Modules / Calls From:
# Domain entities (construction and rehydration), hydration repository date windows

from datetime import datetime, timedelta, timezone
from typing import Tuple


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to UTC.

    - already UTC: returned unchanged
    - aware in another zone: converted to UTC
    - naive: treated as if it were already UTC (tag only, no shift)
    """
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)
    if value.tzinfo is timezone.utc:
        return value
    return value.astimezone(timezone.utc)


def day_range(reference: datetime) -> Tuple[datetime, datetime]:
    """Half-open [start, end) UTC window of the calendar day containing reference."""
    start = ensure_utc(reference).replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


def week_range(reference: datetime) -> Tuple[datetime, datetime]:
    """Half-open UTC window of the Monday-start week containing reference."""
    day_start, _ = day_range(reference)
    start = day_start - timedelta(days=day_start.weekday())
    return start, start + timedelta(days=7)


def month_range(month: int, year: int) -> Tuple[datetime, datetime]:
    start = datetime(year, month, 1, tzinfo=timezone.utc)
    if month == 12:
        end = datetime(year + 1, 1, 1, tzinfo=timezone.utc)
    else:
        end = datetime(year, month + 1, 1, tzinfo=timezone.utc)
    return start, end


def year_range(year: int) -> Tuple[datetime, datetime]:
    return (
        datetime(year, 1, 1, tzinfo=timezone.utc),
        datetime(year + 1, 1, 1, tzinfo=timezone.utc),
    )
