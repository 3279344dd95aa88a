"""
Vehicle service implementation.
"""

from __future__ import annotations

import logging

from logistics_console.shared.envelope import unwrap_list
from logistics_console.shared.service import BaseApiService

from .exceptions import VehicleAssignedError
from .interfaces import IVehicleService
from .models import Vehicle, VehiclePayload

logger = logging.getLogger(__name__)

BASE_ENDPOINT = "/vehicule"
LIST_ENDPOINT = "/vehicule/getAll"
CREATE_ENDPOINT = "/vehicule/create"
IMMATRICULATIONS_ENDPOINT = "/vehicule/allImmatriculations"


class VehicleService(BaseApiService[Vehicle], IVehicleService):
    """Vehicle CRUD against the /vehicule endpoints."""

    async def list(self) -> list[Vehicle]:
        return await self.fetch_many(Vehicle, LIST_ENDPOINT)

    async def get_by_id(self, immatriculation: str) -> Vehicle:
        return await self.fetch_one(Vehicle, f"{BASE_ENDPOINT}/{immatriculation}")

    async def create(self, payload: VehiclePayload) -> Vehicle:
        vehicle = await self.send_one("POST", Vehicle, CREATE_ENDPOINT, payload.to_wire())
        logger.info(f"Created vehicle {vehicle.immatriculation}")
        return vehicle

    async def update(self, immatriculation: str, payload: VehiclePayload) -> Vehicle:
        return await self.send_one(
            "PUT", Vehicle, f"{BASE_ENDPOINT}/{immatriculation}", payload.to_wire()
        )

    async def delete(self, immatriculation: str) -> None:
        if not await self.is_vehicle_available(immatriculation):
            raise VehicleAssignedError(immatriculation)
        await self._api.delete(f"{BASE_ENDPOINT}/{immatriculation}")
        logger.info(f"Deleted vehicle {immatriculation}")

    async def is_vehicle_available(self, immatriculation: str) -> bool:
        vehicle = await self.get_by_id(immatriculation)
        return vehicle.is_available

    async def list_available(self) -> list[Vehicle]:
        return [vehicle for vehicle in await self.list() if vehicle.is_available]

    async def list_by_agency(self, agency_id: str) -> list[Vehicle]:
        return await self.fetch_many(Vehicle, f"{BASE_ENDPOINT}/agence/{agency_id}")

    async def list_immatriculations(self) -> list[str]:
        payload = await self._api.get(IMMATRICULATIONS_ENDPOINT)
        return [str(item) for item in unwrap_list(payload, IMMATRICULATIONS_ENDPOINT)]
