"""Date manipulation utilities"""

from datetime import date, timedelta
from typing import Iterable

from dateutil.relativedelta import relativedelta


def add_months(anchor: date, months: int) -> date:
    """Add calendar months, clamping to month end (Jan 31 + 1 month -> Feb 28/29)"""
    return anchor + relativedelta(months=months)


def subtract_days(from_date: date, days: int) -> date:
    """Subtract calendar days from a date"""
    return from_date - timedelta(days=days)


def is_non_decreasing(dates: Iterable[date]) -> bool:
    """True if every date is on or after the one before it"""
    previous = None
    for current in dates:
        if previous is not None and current < previous:
            return False
        previous = current
    return True
