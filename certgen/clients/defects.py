import logging
from typing import Any, Dict, List, Optional

import httpx
from tenacity import after_log, retry, retry_if_exception_type, stop_after_attempt

from certgen.clients.base import RemoteLookupError, ServiceClient
from certgen.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class DefectsClient(ServiceClient):
    """Client for the defects dictionary service"""

    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        settings = settings or default_settings
        super().__init__(settings.DEFECTS_BASE_URL, settings, transport)

    @retry(
        stop=stop_after_attempt(3),
        retry=retry_if_exception_type((RemoteLookupError, httpx.HTTPError, ValueError)),
        after=after_log(logger, logging.WARNING),
        reraise=True,
    )
    async def _fetch_defects(self) -> List[Dict[str, Any]]:
        defects = await self._get_json("/defects/")
        if not defects:
            raise RemoteLookupError(400, "Lambda invocation returned bad data: empty defects list")
        return defects

    async def get_welsh_defect_dictionary(self) -> List[Dict[str, Any]]:
        """
        Defect tree carrying Welsh descriptions.

        Returns:
            The tree, or an empty list once three attempts have failed
        """
        try:
            return await self._fetch_defects()
        except (RemoteLookupError, httpx.HTTPError, ValueError) as e:
            logger.error(f"Unable to retrieve defect translations after 3 attempts: {e}")
            return []
