"""Field coercion helpers for JSON payloads.

All helpers raise ValueError with a user-facing message; routes turn that
into a 400 via safe_error_response().
"""
from datetime import date
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

CENTS = Decimal('0.01')

# Upper bound of a Postgres INTEGER column
MAX_ID = 2 ** 31 - 1

# NUMERIC(12,2): ten digits before the decimal point
MONEY_LIMIT = Decimal(10) ** 10


def clean_str(value: Any) -> Optional[str]:
    """Strip strings, map empty strings to None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_str(value: Any, label: str) -> str:
    value = clean_str(value)
    if value is None:
        raise ValueError(f'{label} is required')
    return value


def optional_int(value: Any, label: str, minimum: int = 1, maximum: int = MAX_ID) -> Optional[int]:
    """Parse an integer id or count. '' and None mean 'not given'.

    Only JSON integers, integral floats and plain digit strings are accepted,
    so exponent notation can never expand into a huge number.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValueError(f'{label} must be a whole number')
    if isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        text = value.strip()
        if len(text) > len(str(maximum)):
            raise ValueError(f'{label} must be between {minimum} and {maximum}')
        number = int(text)
    else:
        raise ValueError(f'{label} must be a whole number')
    if not minimum <= number <= maximum:
        raise ValueError(f'{label} must be between {minimum} and {maximum}')
    return number


def require_int(value: Any, label: str, minimum: int = 1, maximum: int = MAX_ID) -> int:
    number = optional_int(value, label, minimum, maximum)
    if number is None:
        raise ValueError(f'{label} is required')
    return number


def to_money(
    value: Any,
    label: str,
    default: Optional[Decimal] = None,
    limit: Decimal = MONEY_LIMIT
) -> Decimal:
    """Parse a non-negative amount below `limit`, rounded to centavos."""
    if value is None or (isinstance(value, str) and not value.strip()):
        if default is None:
            raise ValueError(f'{label} is required')
        return default
    if isinstance(value, bool):
        raise ValueError(f'{label} must be a number')
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f'{label} must be a number')
    if not amount.is_finite():
        raise ValueError(f'{label} must be a number')
    if amount < 0:
        raise ValueError(f'{label} cannot be negative')
    if amount >= limit:
        raise ValueError(f'{label} must be less than {limit:,}')
    try:
        amount = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValueError(f'{label} must be a number')
    # 9999999999.995 rounds up to the limit
    if amount >= limit:
        raise ValueError(f'{label} must be less than {limit:,}')
    return amount


def optional_date(value: Any, label: str) -> Optional[date]:
    """Parse YYYY-MM-DD (a trailing time part, as sent by the dashboard, is ignored)."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, date):
        return value
    text = str(value).strip().split('T')[0]
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise ValueError(f'{label} must be a date in YYYY-MM-DD format')


def require_date(value: Any, label: str) -> date:
    parsed = optional_date(value, label)
    if parsed is None:
        raise ValueError(f'{label} is required')
    return parsed


def check_date_range(start: Optional[date], end: Optional[date]):
    if start and end and end < start:
        raise ValueError('End date cannot be before start date')
