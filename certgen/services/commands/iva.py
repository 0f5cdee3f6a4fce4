from typing import Any, Dict

from certgen.models import CertificateData, IvaDefaults
from certgen.services.certificate_types import is_basic_iva_test
from certgen.services.commands.base import PayloadCommand, PayloadState
from certgen.services.commands.vehicle_approval import vehicle_approval_fields
from certgen.utils import compact, vehicle_identifier


class IvaCertificateCommand(PayloadCommand):
    """Individual Vehicle Approval fail certificate."""
    applies_to = (CertificateData.IVA_DATA,)

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        test_result = state.test_result
        identifier = vehicle_identifier(test_result)
        body_type = test_result.get("bodyType") or {}

        content = {
            "vin": test_result.get("vin"),
            "serialNumber": identifier,
            "vehicleTrailerNrNo": identifier,
            "testCategoryClass": test_result.get("euVehicleCategory"),
            "testCategoryBasicNormal": (
                IvaDefaults.BASIC if is_basic_iva_test(state.test_type.get("testTypeId")) else IvaDefaults.NORMAL
            ),
            "make": test_result.get("make"),
            "model": test_result.get("model"),
            "bodyType": body_type.get("description"),
        }
        content.update(vehicle_approval_fields(test_result))
        return {"IVA_DATA": compact(content)}
