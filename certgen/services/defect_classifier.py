import logging
from typing import Any, Dict, List, Optional

from certgen.models import (
    DefectBucket, DefectBucketName, DefectCategory, FlatDefect, TestResult
)
from certgen.services.certificate_types import is_welsh_certificate_available
from certgen.services.defect_formatter import format_defect, format_defect_welsh

logger = logging.getLogger(__name__)

FAIL_DATA = "FAIL_DATA"


def classify(defect: Dict[str, Any], test_result: str, section: str) -> Optional[DefectBucketName]:
    """
    Bucket a defect for one payload section.

    Dangerous and major defects rectified at the test land in PRS on the fail
    section; unrectified ones only print on a failed test. Anything else that
    is not minor or advisory is dropped.
    """
    category = (defect.get("deficiencyCategory") or "").lower()

    if category in (DefectCategory.DANGEROUS, DefectCategory.MAJOR):
        if (test_result == TestResult.PRS or defect.get("prs")) and section == FAIL_DATA:
            return DefectBucketName.PRS
        if test_result == TestResult.FAIL:
            if category == DefectCategory.DANGEROUS:
                return DefectBucketName.DANGEROUS
            return DefectBucketName.MAJOR
        return None
    if category == DefectCategory.MINOR:
        return DefectBucketName.MINOR
    if category == DefectCategory.ADVISORY:
        return DefectBucketName.ADVISORY
    return None


def bucket_defects(defects: List[Dict[str, Any]], vehicle_type: str, test_result: str,
                   section: str, is_welsh: bool = False,
                   flat_defects: Optional[List[FlatDefect]] = None) -> DefectBucket:
    bucket = DefectBucket()
    # Without a dictionary no Welsh list is printed, advisories included
    add_welsh = bool(
        is_welsh and flat_defects and is_welsh_certificate_available(vehicle_type, test_result)
    )

    for defect in defects or []:
        name = classify(defect, test_result, section)
        if name is None:
            logger.debug(f"Defect {defect.get('deficiencyRef')} not printed on {section}")
            continue

        welsh_text = None
        if add_welsh:
            if name == DefectBucketName.ADVISORY:
                # No Welsh advisory template exists
                welsh_text = format_defect(defect)
            else:
                welsh_text = format_defect_welsh(defect, vehicle_type, flat_defects)
        bucket.add(name, format_defect(defect), welsh_text)
    return bucket


def generate_defects(test_result: Dict[str, Any], section: str, is_welsh: bool = False,
                     flat_defects: Optional[List[FlatDefect]] = None) -> Dict[str, Any]:
    """Defect payload keys for a section, with empty buckets left out."""
    test_type = test_result.get("testTypes") or {}
    bucket = bucket_defects(
        test_type.get("defects") or [],
        test_result.get("vehicleType"),
        test_type.get("testResult"),
        section,
        is_welsh,
        flat_defects,
    )
    return bucket.to_payload()
