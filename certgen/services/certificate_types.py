"""
Certificate template resolution.

A test result maps to a template id such as ``hgv_pass`` or ``rwt``, the
certificate data type the payload is generated for, and the payload sections
the template reads.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from certgen.models import (
    ADR_TEST_TYPE_IDS, AVAILABLE_WELSH, BASIC_IVA_TEST_TYPE_IDS, CertificateData,
    IVA_TEST_TYPE_IDS, MSVA_TEST_TYPE_IDS, ROADWORTHINESS_TEST_TYPE_IDS,
    TestResult, VehicleType
)
from certgen.services.errors import InvalidTestResultError

logger = logging.getLogger(__name__)

DOCUMENT_NAMES = {
    "psv_pass": "VTP20.pdf",
    "psv_pass_bilingual": "VTP20_BILINGUAL.pdf",
    "psv_fail": "VTP30.pdf",
    "psv_fail_bilingual": "VTP30_BILINGUAL.pdf",
    "psv_prs": "PSV_PRS.pdf",
    "psv_prs_bilingual": "PSV_PRS_BILINGUAL.pdf",
    "hgv_pass": "VTG5.pdf",
    "hgv_pass_bilingual": "VTG5_BILINGUAL.pdf",
    "hgv_fail": "VTG30.pdf",
    "hgv_fail_bilingual": "VTG30_BILINGUAL.pdf",
    "hgv_prs": "HGV_PRS.pdf",
    "hgv_prs_bilingual": "HGV_PRS_BILINGUAL.pdf",
    "trl_pass": "VTG5A.pdf",
    "trl_pass_bilingual": "VTG5A_BILINGUAL.pdf",
    "trl_fail": "VTG30.pdf",
    "trl_fail_bilingual": "VTG30_BILINGUAL.pdf",
    "trl_prs": "TRL_PRS.pdf",
    "trl_prs_bilingual": "TRL_PRS_BILINGUAL.pdf",
    "rwt": "RWT.pdf",
    "adr_pass": "ADR_PASS.pdf",
    "iva_fail": "IVA30.pdf",
    "msva_fail": "MSVA30.pdf",
}

SECTIONS_BY_RESULT = {
    TestResult.PASS: ["DATA"],
    TestResult.FAIL: ["FAIL_DATA"],
    TestResult.PRS: ["DATA", "FAIL_DATA"],
}


@dataclass
class CertificateType:
    template: str
    certificate_data: CertificateData
    sections: List[str]

    @property
    def document_name(self) -> str:
        return DOCUMENT_NAMES[self.template]


def is_roadworthiness_test(test_type_id: str) -> bool:
    return test_type_id in ROADWORTHINESS_TEST_TYPE_IDS


def is_adr_test(test_type_id: str) -> bool:
    return test_type_id in ADR_TEST_TYPE_IDS


def is_iva_test(test_type_id: str) -> bool:
    return test_type_id in IVA_TEST_TYPE_IDS


def is_basic_iva_test(test_type_id: str) -> bool:
    return test_type_id in BASIC_IVA_TEST_TYPE_IDS


def is_msva_test(test_type_id: str) -> bool:
    return test_type_id in MSVA_TEST_TYPE_IDS


def is_hgv_trl_roadworthiness_certificate(test_result: Dict[str, Any]) -> bool:
    test_type_id = (test_result.get("testTypes") or {}).get("testTypeId")
    return (
        test_result.get("vehicleType") in (VehicleType.HGV, VehicleType.TRL)
        and is_roadworthiness_test(test_type_id)
    )


def is_welsh_certificate_available(vehicle_type: str, test_result: str) -> bool:
    return f"{vehicle_type}_{test_result}" in AVAILABLE_WELSH


def is_valid_for_trn(vehicle_type: str, make_and_model: Dict[str, Any]) -> bool:
    """Trailer registration numbers only exist for trailers with a known make."""
    return bool(make_and_model and make_and_model.get("Make")) and vehicle_type == VehicleType.TRL


def resolve_certificate_type(test_result: Dict[str, Any], is_welsh: bool = False) -> CertificateType:
    """
    Resolve the template for a test result.

    Roadworthiness, ADR, IVA and MSVA tests have dedicated templates; everything
    else is keyed by vehicle type and outcome, with a bilingual variant when
    Welsh output is requested and available. PRS prints on the fail-family
    certificate data with both the pass and fail sections.
    """
    test_type = test_result.get("testTypes") or {}
    test_type_id = test_type.get("testTypeId")
    outcome = test_type.get("testResult")
    vehicle_type = test_result.get("vehicleType")

    if is_hgv_trl_roadworthiness_certificate(test_result):
        return CertificateType("rwt", CertificateData.RWT_DATA, ["RWT_DATA"])
    if is_adr_test(test_type_id) and outcome == TestResult.PASS:
        return CertificateType("adr_pass", CertificateData.ADR_DATA, ["ADR_DATA"])
    if is_iva_test(test_type_id):
        return CertificateType("iva_fail", CertificateData.IVA_DATA, ["IVA_DATA"])
    if is_msva_test(test_type_id):
        return CertificateType("msva_fail", CertificateData.MSVA_DATA, ["MSVA_DATA"])

    if outcome not in SECTIONS_BY_RESULT:
        raise InvalidTestResultError(f"No certificate for test result '{outcome}'")

    template = f"{vehicle_type}_{outcome}"
    if template not in DOCUMENT_NAMES:
        raise InvalidTestResultError(f"No certificate template for '{template}'")
    if is_welsh and is_welsh_certificate_available(vehicle_type, outcome):
        template = f"{template}_bilingual"

    certificate_data = (
        CertificateData.PASS_DATA if outcome == TestResult.PASS else CertificateData.FAIL_DATA
    )
    logger.debug(f"Resolved certificate template {template}")
    return CertificateType(template, certificate_data, list(SECTIONS_BY_RESULT[outcome]))
