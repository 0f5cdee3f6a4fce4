"""
Date helpers for certificate payloads.

Certificate bodies print dates as DD.MM.YYYY, vehicle approval (IVA/MSVA)
certificates as DD/MM/YYYY.
"""

import calendar
from datetime import date, datetime, timezone
from typing import Optional, Union

CERTIFICATE_DATE_FORMAT = "%d.%m.%Y"
APPROVAL_DATE_FORMAT = "%d/%m/%Y"

DateLike = Union[str, date, datetime]


def parse_timestamp(value: Optional[DateLike]) -> datetime:
    """Parse into an aware datetime. Naive values are UTC; missing ones sort first."""
    if not value:
        return datetime.min.replace(tzinfo=timezone.utc)
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(value: DateLike) -> date:
    """Parse an ISO date or timestamp (trailing Z allowed) into a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_timestamp(value).date()


def format_certificate_date(value: Optional[DateLike]) -> Optional[str]:
    if not value:
        return None
    return parse_date(value).strftime(CERTIFICATE_DATE_FORMAT)


def format_approval_date(value: Optional[DateLike]) -> Optional[str]:
    if not value:
        return None
    return parse_date(value).strftime(APPROVAL_DATE_FORMAT)


def add_months(value: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def earliest_date_of_next_test(anniversary: Optional[DateLike], vehicle_type: str,
                               test_result: str) -> Optional[str]:
    """
    HGV and trailer passes may be retested from the start of the month before
    the anniversary. Everything else shows the anniversary itself.
    """
    if not anniversary:
        return None
    anniversary_date = parse_date(anniversary)
    if vehicle_type in ("hgv", "trl") and test_result in ("pass", "prs"):
        first_of_month = add_months(anniversary_date.replace(day=1), -1)
        return first_of_month.strftime(CERTIFICATE_DATE_FORMAT)
    return anniversary_date.strftime(CERTIFICATE_DATE_FORMAT)
