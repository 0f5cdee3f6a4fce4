from .dates import (
    parse_timestamp, parse_date, format_certificate_date, format_approval_date, add_months,
    earliest_date_of_next_test
)
from .payload import compact, natural_sort_key, vehicle_identifier

__all__ = [
    "parse_timestamp", "parse_date", "format_certificate_date", "format_approval_date", "add_months",
    "earliest_date_of_next_test",
    "compact", "natural_sort_key", "vehicle_identifier",
]
