import logging
from typing import Any, Dict, Optional

import httpx

from certgen.clients.base import RemoteLookupError, ServiceClient
from certgen.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class TrailerRegistrationClient(ServiceClient):
    """Client for the trailer registration service"""

    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        settings = settings or default_settings
        super().__init__(settings.TRAILER_REGISTRATION_BASE_URL, settings, transport)

    async def get_trailer_registration(self, vin: str, make: str) -> Dict[str, Any]:
        response = await self._request("GET", f"/v1/trailers/{vin}", params={"make": make})

        if response.status_code == 404:
            logger.info(f"No trailer registration for {vin}")
            return {"Trn": None, "IsTrailer": True}

        if response.status_code >= 400:
            raise RemoteLookupError(
                500, f"Lambda invocation returned error: {response.status_code} {response.text}"
            )

        body = response.json() if response.content else {}
        return {"Trn": body.get("trn"), "IsTrailer": True}
