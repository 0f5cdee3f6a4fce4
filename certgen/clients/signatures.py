import logging
from typing import Optional

import httpx

from certgen.clients.base import ServiceClient
from certgen.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class SignatureClient(ServiceClient):
    """Reads tester signatures stored as base64 text files."""

    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        settings = settings or default_settings
        super().__init__(settings.SIGNATURE_BASE_URL, settings, transport)

    async def get_signature(self, staff_id: str) -> Optional[str]:
        if not staff_id:
            logger.warning("No staff id to look up a signature for")
            return None
        try:
            response = await self._request("GET", f"/{staff_id}.base64")
        except httpx.HTTPError as e:
            logger.error(f"Unable to fetch signature {staff_id}.base64: {e}")
            return None

        if response.status_code >= 400 or not response.content:
            logger.error(f"Unable to fetch signature {staff_id}.base64: {response.status_code}")
            return None
        return response.text
