import logging
from typing import Any, Dict, List, Optional

import httpx

from certgen.clients.base import RemoteLookupError, ServiceClient
from certgen.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class TechRecordsClient(ServiceClient):
    """Client for the technical records service"""

    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        settings = settings or default_settings
        super().__init__(settings.TECH_RECORDS_BASE_URL, settings, transport)

    async def search(self, system_number: str) -> List[Dict[str, Any]]:
        """Summary rows for every tech record version of a vehicle."""
        try:
            return await self._get_json(
                f"/v3/technical-records/search/{system_number}",
                params={"searchCriteria": "systemNumber"},
            )
        except (RemoteLookupError, httpx.HTTPError) as e:
            logger.error(f"Error searching technical records for {system_number}: {e}")
            return []

    async def get_record(self, system_number: str, created_timestamp: str) -> Dict[str, Any]:
        return await self._get_json(
            f"/v3/technical-records/{system_number}/{created_timestamp}"
        )

    async def get_vehicle_record(self, test_result: Dict[str, Any]) -> Dict[str, Any]:
        """
        Fetch the tech record a certificate should be printed from.

        The current record wins. Without one, a single provisional record is
        used; when there are several, the second is taken.
        """
        system_number = test_result.get("systemNumber")
        search_results = await self.search(system_number)
        summary = select_record_summary(search_results)
        if not summary:
            raise RemoteLookupError(404, "Tech record Search returned nothing.")

        record = await self.get_record(summary["systemNumber"], summary["createdTimestamp"])
        if not record:
            raise RemoteLookupError(404, f"No tech record found for {system_number}")
        return record


def select_record_summary(search_results: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if not search_results:
        return None
    for result in search_results:
        if result.get("techRecord_statusCode") == "current":
            return result
    provisional = [
        result for result in search_results
        if result.get("techRecord_statusCode") == "provisional"
    ]
    if len(provisional) == 1:
        return provisional[0]
    if len(provisional) > 1:
        return provisional[1]
    return None
