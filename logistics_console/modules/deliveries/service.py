"""
Delivery service implementation.

These endpoints answer with bare objects and arrays rather than
envelopes; the envelope parsers accept both.
"""

from __future__ import annotations

import logging

from logistics_console.shared.service import BaseApiService

from .interfaces import IDeliveryService
from .models import Delivery, DeliveryPayload

logger = logging.getLogger(__name__)

ITEM_ENDPOINT = "/courriers/livraison"
LIST_ENDPOINT = "/courriers/livraisons"


class DeliveryService(BaseApiService[Delivery], IDeliveryService):
    """Delivery CRUD against the /courriers/livraison endpoints."""

    async def list(self) -> list[Delivery]:
        return await self.fetch_many(Delivery, LIST_ENDPOINT)

    async def get_by_id(self, delivery_id: int) -> Delivery:
        return await self.fetch_one(Delivery, f"{ITEM_ENDPOINT}/{delivery_id}")

    async def create(self, payload: DeliveryPayload) -> Delivery:
        delivery = await self.send_one("POST", Delivery, ITEM_ENDPOINT, payload.to_wire())
        logger.info(f"Created delivery {delivery.id} for courier {delivery.courier_id}")
        return delivery

    async def update(self, delivery_id: int, payload: DeliveryPayload) -> Delivery:
        return await self.send_one(
            "PUT", Delivery, f"{ITEM_ENDPOINT}/{delivery_id}", payload.to_wire()
        )

    async def delete(self, delivery_id: int) -> None:
        await self._api.delete(f"{ITEM_ENDPOINT}/{delivery_id}")
        logger.info(f"Deleted delivery {delivery_id}")

    async def list_by_transporter(self, transporter_id: str) -> list[Delivery]:
        return await self.fetch_many(Delivery, f"{LIST_ENDPOINT}/transporteur/{transporter_id}")

    async def list_by_vehicle(self, vehicle_id: str) -> list[Delivery]:
        return await self.fetch_many(Delivery, f"{LIST_ENDPOINT}/vehicule/{vehicle_id}")
