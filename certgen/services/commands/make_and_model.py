import logging
from typing import Any, Dict

from certgen.clients.ports import TrailerRegistrationLookup
from certgen.services.certificate_types import is_valid_for_trn
from certgen.services.commands.base import PASS_OR_FAIL, PayloadCommand, PayloadState, per_section
from certgen.services.tech_records import TechRecordService
from certgen.utils import compact

logger = logging.getLogger(__name__)


class MakeAndModelCommand(PayloadCommand):
    """Make and model from the tech record, plus the TRN for trailers."""
    applies_to = PASS_OR_FAIL

    def __init__(self, tech_records: TechRecordService, trailers: TrailerRegistrationLookup):
        self.tech_records = tech_records
        self.trailers = trailers

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        test_result = state.test_result
        make_and_model = await self.tech_records.get_vehicle_make_and_model(test_result)

        if is_valid_for_trn(state.vehicle_type, make_and_model):
            logger.debug(f"Looking up TRN for trailer {test_result.get('vin')}")
            registration = await self.trailers.get_trailer_registration(
                test_result.get("vin"), make_and_model["Make"]
            )
            make_and_model.update(registration)

        return per_section(state, compact(make_and_model))
