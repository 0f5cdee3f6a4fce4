"""Shared fields of the IVA and MSVA fail certificates."""

from typing import Any, Dict, List, Optional

from certgen.services.defect_formatter import format_vehicle_approval_additional_defects
from certgen.utils import format_approval_date, natural_sort_key


def sort_required_standards(required_standards: Optional[List[Dict[str, Any]]]) -> Optional[List[Dict[str, Any]]]:
    if required_standards is None:
        return None
    return sorted(
        required_standards,
        key=lambda standard: natural_sort_key(standard.get("refCalculation")),
    )


def vehicle_approval_fields(test_result: Dict[str, Any]) -> Dict[str, Any]:
    test_type = test_result.get("testTypes") or {}
    return {
        "date": format_approval_date(test_type.get("testTypeStartTimestamp")),
        "testerName": test_result.get("testerName"),
        "reapplicationDate": format_approval_date(test_type.get("reapplicationDate")) or "",
        "station": test_result.get("testStationName"),
        "additionalDefects": format_vehicle_approval_additional_defects(test_type.get("customDefects")),
        "requiredStandards": sort_required_standards(test_type.get("requiredStandards")),
    }
