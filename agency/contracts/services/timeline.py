"""Contract term arithmetic.

Months are counted as 30-day blocks, rounded up, which is how the
dashboard labels contract durations.
"""
import math
from datetime import date
from typing import Dict, Any

EXPIRING_WINDOW_DAYS = 30

STATUS_ACTIVE = 'active'
STATUS_EXPIRING = 'expiring'
STATUS_EXPIRED = 'expired'


def _months(days: int) -> int:
    return math.ceil(days / 30)


def contract_timeline(start: date, end: date, today: date = None) -> Dict[str, Any]:
    """Derive duration, remaining time, progress and term status for a contract.

    Args:
        start: Contract start date
        end: Contract end date
        today: Reference date (defaults to date.today())

    Returns:
        Dict with total_days, total_months, days_remaining, months_remaining,
        progress_percentage (0-100) and contract_status
        ('active', 'expiring' or 'expired')
    """
    today = today or date.today()

    total_days = (end - start).days
    days_remaining = (end - today).days
    days_elapsed = (today - start).days

    if total_days > 0:
        progress = min(100.0, max(0.0, days_elapsed / total_days * 100))
    else:
        # Single-day term
        progress = 100.0 if today >= start else 0.0

    if days_remaining < 0:
        status = STATUS_EXPIRED
    elif days_remaining <= EXPIRING_WINDOW_DAYS:
        status = STATUS_EXPIRING
    else:
        status = STATUS_ACTIVE

    return {
        'total_days': total_days,
        'total_months': _months(total_days),
        'days_remaining': days_remaining,
        'months_remaining': _months(days_remaining),
        'progress_percentage': round(progress, 2),
        'contract_status': status,
    }


def add_years(value: date, years: int) -> date:
    """Shift a date by whole years; Feb 29 falls back to Feb 28."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)
