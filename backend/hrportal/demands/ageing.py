"""
Demand ageing in whole weeks
"""
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional

from dateutil import parser as date_parser


def _as_utc_datetime(value: Any) -> Optional[datetime]:
    """Coerce a date, datetime or date string to an aware UTC datetime"""
    if not value:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError):
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def ageing_weeks(created_date: Any, now: Optional[datetime] = None) -> int:
    """
    Whole weeks elapsed since ``created_date``.

    Missing, unparsable or future dates give 0.
    """
    created = _as_utc_datetime(created_date)
    if created is None:
        return 0

    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    elapsed_days = (now - created) // timedelta(days=1)
    return max(0, elapsed_days // 7)
