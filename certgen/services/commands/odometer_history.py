import logging
from typing import Any, Dict

import httpx

from certgen.clients import RemoteLookupError
from certgen.clients.ports import OdometerHistoryLookup
from certgen.models import VehicleType
from certgen.services.commands.base import PASS_OR_FAIL, PayloadCommand, PayloadState, per_section

logger = logging.getLogger(__name__)


class OdometerHistoryCommand(PayloadCommand):
    """Previous odometer readings; trailers have none."""
    applies_to = PASS_OR_FAIL

    def __init__(self, odometer_history: OdometerHistoryLookup):
        self.odometer_history = odometer_history

    async def build(self, state: PayloadState) -> Dict[str, Any]:
        if state.vehicle_type == VehicleType.TRL:
            return {}

        system_number = state.test_result.get("systemNumber")
        try:
            history = await self.odometer_history.get_odometer_history(system_number)
        except (RemoteLookupError, httpx.HTTPError, ValueError) as e:
            logger.error(f"Odometer history unavailable for {system_number}: {e}")
            return {}

        if not history or not history.get("OdometerHistoryList"):
            return {}
        return per_section(state, history)
