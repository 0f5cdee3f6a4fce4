import logging
from typing import Any, Dict

from certgen.clients.ports import SignatureLookup
from certgen.services.commands.base import PayloadCommand, PayloadState

logger = logging.getLogger(__name__)


class SignatureCommand(PayloadCommand):
    """Tester signature image, printed on every certificate."""

    def __init__(self, signatures: SignatureLookup):
        self.signatures = signatures

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        test_result = state.test_result
        staff_id = test_result.get("createdById")
        if staff_id is None:
            staff_id = test_result.get("testerStaffId")
        image = await self.signatures.get_signature(staff_id)
        if image is None:
            logger.warning(f"No signature found for staff id {staff_id}")
        return {"Signature": {"ImageType": "png", "ImageData": image}}
