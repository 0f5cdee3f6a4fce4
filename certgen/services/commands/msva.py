from typing import Any, Dict

from certgen.models import CertificateData
from certgen.services.commands.base import PayloadCommand, PayloadState
from certgen.services.commands.vehicle_approval import vehicle_approval_fields
from certgen.utils import compact


class MsvaCertificateCommand(PayloadCommand):
    """Motorcycle Single Vehicle Approval fail certificate."""
    applies_to = (CertificateData.MSVA_DATA,)

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        test_result = state.test_result
        content = {
            "vin": test_result.get("vin"),
            "serialNumber": test_result.get("vrm"),
            "vehicleZNumber": test_result.get("vrm"),
            "make": test_result.get("make"),
            "model": test_result.get("model"),
            "type": test_result.get("vehicleType"),
        }
        content.update(vehicle_approval_fields(test_result))
        return {"MSVA_DATA": compact(content)}
