"""
VehicleDatabases API Client

Client for the VehicleDatabases repairs lookup (year / make / model).
Every failure is raised as VehicleDatabasesError so callers can fall back.
"""

import logging
import httpx
from typing import Optional, Union
from urllib.parse import quote

from app.core.config import settings
from app.core.exceptions import VehicleDatabasesError

logger = logging.getLogger(__name__)


class VehicleDatabasesClient:
    """Client for the VehicleDatabases REST API"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key if api_key is not None else settings.VEHICLE_DB_API_KEY
        self.base_url = (base_url or settings.VEHICLE_DB_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.VEHICLE_DB_TIMEOUT
        self.transport = transport

    def repairs_url(self, year: Union[int, str], make: str, model: str) -> str:
        """Build the repairs-by-YMM URL."""
        return (
            f"{self.base_url}/repairs-ymm/{quote(str(year), safe='')}"
            f"/{quote(make, safe='')}/{quote(model, safe='')}"
        )

    async def get_repairs(self, year: Union[int, str], make: str, model: str) -> dict:
        """
        Fetch the repair list for a vehicle.

        Raises:
            VehicleDatabasesError: Non-2xx status, transport failure or a
                body that is not JSON
        """
        url = self.repairs_url(year, make, model)
        headers = {
            "x-AuthKey": self.api_key,
            "Content-Type": "application/json"
        }

        logger.info(f"Calling VehicleDatabases repairs: {year} {make} {model}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, headers=headers)
        except httpx.TimeoutException as e:
            raise VehicleDatabasesError("timeout") from e
        except httpx.HTTPError as e:
            raise VehicleDatabasesError(f"cannot reach API: {e}") from e

        if not response.is_success:
            raise VehicleDatabasesError(
                f"HTTP {response.status_code}",
                status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise VehicleDatabasesError("response is not valid JSON") from e
