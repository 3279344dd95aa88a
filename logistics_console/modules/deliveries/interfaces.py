"""
Deliveries module interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Delivery, DeliveryPayload


@runtime_checkable
class IDeliveryService(Protocol):
    """
    Interface for delivery operations.

    The service does not touch the courier's status; pairing a delivery
    with its courier transition is the delivery screen's job.
    """

    async def list(self) -> list[Delivery]:
        ...

    async def get_by_id(self, delivery_id: int) -> Delivery:
        ...

    async def create(self, payload: DeliveryPayload) -> Delivery:
        ...

    async def update(self, delivery_id: int, payload: DeliveryPayload) -> Delivery:
        ...

    async def delete(self, delivery_id: int) -> None:
        ...

    async def list_by_transporter(self, transporter_id: str) -> list[Delivery]:
        ...

    async def list_by_vehicle(self, vehicle_id: str) -> list[Delivery]:
        ...
