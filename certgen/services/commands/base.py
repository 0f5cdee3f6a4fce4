from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from certgen.models import CertificateData, TestResult


@dataclass
class PayloadState:
    """Inputs shared by every command of one generation."""
    test_result: Dict[str, Any]
    certificate_type: CertificateData
    is_welsh: bool = False

    @property
    def test_type(self) -> Dict[str, Any]:
        return self.test_result.get("testTypes") or {}

    @property
    def outcome(self) -> str:
        return self.test_type.get("testResult")

    @property
    def vehicle_type(self) -> str:
        return self.test_result.get("vehicleType")

    @property
    def sections(self) -> List[str]:
        """DATA unless the test failed outright, FAIL_DATA unless it passed."""
        sections = []
        if self.outcome != TestResult.FAIL:
            sections.append("DATA")
        if self.outcome != TestResult.PASS:
            sections.append("FAIL_DATA")
        return sections


class PayloadCommand:
    """
    Produces one fragment of a certificate payload.

    Commands only contribute to the certificate data types listed in
    ``applies_to``; an empty tuple means every type.
    """
    applies_to: Tuple[CertificateData, ...] = ()

    def is_applicable(self, state: PayloadState) -> bool:
        return not self.applies_to or state.certificate_type in self.applies_to

    async def generate(self, state: PayloadState) -> Dict[str, Any]:
        if not self.is_applicable(state):
            return {}
        return await self.build(state)

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        raise NotImplementedError


PASS_OR_FAIL = (CertificateData.PASS_DATA, CertificateData.FAIL_DATA)


def per_section(state: PayloadState, content: Dict[str, Any]) -> Dict[str, Any]:
    """Copy the same content into each section the outcome prints on."""
    if not content:
        return {}
    return {section: dict(content) for section in state.sections}
