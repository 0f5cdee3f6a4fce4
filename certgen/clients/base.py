import httpx
import logging
from typing import Any, Dict, Optional

from certgen.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class RemoteLookupError(Exception):
    """Upstream service returned an error or unusable data"""

    def __init__(self, status_code: int, body: Any):
        super().__init__(f"{status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ServiceClient:
    """Base for JSON-over-HTTP clients of the vehicle testing services"""

    def __init__(self, base_url: str, settings: Optional[Settings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings or default_settings
        self.base_url = base_url.rstrip("/")
        self.timeout = self.settings.REQUEST_TIMEOUT
        self.headers = self.settings.request_headers
        self.transport = transport

    async def _request(self, method: str, endpoint: str,
                       params: Dict[str, Any] = None) -> httpx.Response:
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        async with httpx.AsyncClient(timeout=self.timeout, headers=self.headers,
                                     transport=self.transport) as client:
            if method.upper() == "GET":
                response = await client.get(url, params=params)
            else:
                raise ValueError(f"Unsupported method: {method}")
        logger.debug(f"{method.upper()} {url} -> {response.status_code}")
        return response

    async def _get_json(self, endpoint: str, params: Dict[str, Any] = None) -> Any:
        """GET and decode a JSON body, treating errors and empty bodies as failures."""
        response = await self._request("GET", endpoint, params=params)
        if response.status_code >= 400:
            raise RemoteLookupError(
                500, f"Lambda invocation returned error: {response.status_code} {response.text}"
            )
        if not response.content:
            raise RemoteLookupError(400, f"Lambda invocation returned bad data: {response.text}")
        return response.json()
