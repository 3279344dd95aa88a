"""
Courier service implementation.
"""

from __future__ import annotations

import logging

from logistics_console.shared.service import BaseApiService

from .exceptions import InvalidStatusTransitionError
from .interfaces import ICourierService
from .models import Courier, CourierPayload, CourierStatus, next_status

logger = logging.getLogger(__name__)

BASE_ENDPOINT = "/courriers"
LIST_ENDPOINT = "/courriers/all"
CREATE_ENDPOINT = "/courriers/create-with-client"
STATUS_ENDPOINT = "/courriers/status"
BY_STATUS_ENDPOINT = "/courriers/statut"


class CourierService(BaseApiService[Courier], ICourierService):
    """Courier CRUD and status transitions against the /courriers endpoints."""

    async def list(self) -> list[Courier]:
        return await self.fetch_many(Courier, LIST_ENDPOINT)

    async def get_by_id(self, courier_id: int) -> Courier:
        return await self.fetch_one(Courier, f"{BASE_ENDPOINT}/{courier_id}")

    async def create(self, payload: CourierPayload) -> Courier:
        courier = await self.send_one("POST", Courier, CREATE_ENDPOINT, payload.to_wire())
        logger.info(f"Created courier {courier.id}")
        return courier

    async def update(self, courier_id: int, payload: CourierPayload) -> Courier:
        return await self.send_one(
            "PUT", Courier, f"{BASE_ENDPOINT}/{courier_id}", payload.to_wire()
        )

    async def delete(self, courier_id: int) -> None:
        await self._api.delete(f"{BASE_ENDPOINT}/{courier_id}")
        logger.info(f"Deleted courier {courier_id}")

    async def list_by_status(self, status: CourierStatus) -> list[Courier]:
        return await self.fetch_many(Courier, f"{BY_STATUS_ENDPOINT}/{status.value}")

    async def change_status(self, courier_id: int, status: CourierStatus) -> Courier:
        courier = await self.send_one(
            "PUT",
            Courier,
            f"{STATUS_ENDPOINT}/{courier_id}",
            params={"newStatus": status.value},
        )
        logger.info(f"Courier {courier_id} status set to {status.value}")
        return courier

    async def advance_status(self, courier_id: int, status: CourierStatus) -> Courier:
        current = (await self.get_by_id(courier_id)).status
        expected = next_status(current)
        if status != expected:
            raise InvalidStatusTransitionError(courier_id, current, status, expected)
        return await self.change_status(courier_id, status)
