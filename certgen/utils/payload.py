import re
from typing import Any, Dict, List


def compact(section: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None or an empty list."""
    return {
        key: value for key, value in section.items()
        if value is not None and value != []
    }


def natural_sort_key(value: str) -> List[Any]:
    """Case-insensitive key that orders "1.10" after "1.9"."""
    return [
        int(part) if part.isdigit() else part.lower()
        for part in re.split(r"(\d+)", value or "")
    ]


def vehicle_identifier(test_result: Dict[str, Any]) -> Any:
    """Trailers are identified by trailer id, everything else by VRM."""
    if test_result.get("vehicleType") == "trl":
        return test_result.get("trailerId")
    return test_result.get("vrm")
