"""
Delivery management screen.

A delivery and its courier's status move together: creating a delivery
puts a deposited courier in delivery, deleting it puts the courier back
to deposited.
"""

import asyncio
import logging
from typing import Any, Iterable, Optional

from logistics_console.modules.auth.models import Role
from logistics_console.modules.courriers import (
    Courier,
    CourierStatus,
    ICourierService,
    InvalidStatusTransitionError,
)
from logistics_console.modules.deliveries import Delivery, DeliveryPayload, IDeliveryService
from logistics_console.modules.employees import Employee, IEmployeeService
from logistics_console.modules.vehicles import IVehicleService, Vehicle
from logistics_console.shared.exceptions import LogisticsError

from .base import EntityScreen
from .notifier import Notifier

logger = logging.getLogger(__name__)

PICKABLE_STATUSES = (CourierStatus.DEPOSITED, CourierStatus.IN_DELIVERY)


class DeliveryScreen(EntityScreen[Delivery]):
    """Deliveries, with the couriers, vehicles and transporters they reference."""

    entity_label = "livraison"

    def __init__(
        self,
        deliveries: IDeliveryService,
        couriers: ICourierService,
        vehicles: IVehicleService,
        employees: IEmployeeService,
        notifier: Optional[Notifier] = None,
    ) -> None:
        super().__init__(notifier)
        self._deliveries = deliveries
        self._couriers = couriers
        self._vehicles = vehicles
        self._employees = employees
        self.couriers: list[Courier] = []
        self.vehicles: list[Vehicle] = []
        self.transporters: list[Employee] = []

    def key_of(self, item: Delivery) -> int:
        return item.id

    def search_fields(self, item: Delivery) -> Iterable[Any]:
        courier = item.courier or self._courier(item.courier_id)
        sender = courier.sender if courier else None
        return (
            item.id,
            sender.name if sender else None,
            sender.surname if sender else None,
        )

    async def _fetch(self) -> tuple[list[Delivery], dict[str, Any]]:
        deliveries, couriers, vehicles, employees = await asyncio.gather(
            self._deliveries.list(),
            self._couriers.list(),
            self._vehicles.list(),
            self._employees.list(),
        )
        return deliveries, {
            "couriers": couriers,
            "vehicles": vehicles,
            "transporters": [e for e in employees if e.role_name is Role.TRANSPORTEUR],
        }

    def _commit(self, items: list[Delivery], refs: dict[str, Any]) -> None:
        super()._commit(items, refs)
        self.couriers = refs["couriers"]
        self.vehicles = refs["vehicles"]
        self.transporters = refs["transporters"]

    @property
    def courier_options(self) -> list[Courier]:
        """Couriers that can be picked for a delivery."""
        return [courier for courier in self.couriers if courier.status in PICKABLE_STATUSES]

    async def create(self, payload: DeliveryPayload) -> Optional[Delivery]:
        async def action() -> Delivery:
            courier = await self._couriers.get_by_id(payload.courier_id)
            if courier.status is not CourierStatus.DEPOSITED:
                raise InvalidStatusTransitionError(
                    courier.id,
                    courier.status,
                    CourierStatus.IN_DELIVERY,
                    expected=CourierStatus.DEPOSITED,
                )

            delivery = await self._deliveries.create(payload)
            try:
                courier = await self._couriers.change_status(
                    courier.id, CourierStatus.IN_DELIVERY
                )
            except LogisticsError:
                await self._undo_create(delivery)
                raise

            self._append(delivery)
            self._patch_courier(courier)
            return delivery

        return await self._run(action, "Livraison créée avec succès")

    async def update(self, delivery_id: int, payload: DeliveryPayload) -> Optional[Delivery]:
        async def action() -> Delivery:
            delivery = await self._deliveries.update(delivery_id, payload)
            self._replace(delivery)
            return delivery

        return await self._run(action, "Livraison mise à jour avec succès")

    async def delete(self, delivery_id: int) -> bool:
        async def action() -> bool:
            delivery = self.find(delivery_id) or await self._deliveries.get_by_id(delivery_id)
            await self._deliveries.delete(delivery_id)
            self._remove(delivery_id)
            courier = await self._couriers.change_status(
                delivery.courier_id, CourierStatus.DEPOSITED
            )
            self._patch_courier(courier)
            return True

        return bool(await self._run(action, "Livraison supprimée avec succès"))

    async def _undo_create(self, delivery: Delivery) -> None:
        try:
            await self._deliveries.delete(delivery.id)
        except LogisticsError as e:
            logger.error(
                f"Delivery {delivery.id} was created but its courier could not be "
                f"moved in delivery, and removing it failed: {e.code}"
            )

    def _courier(self, courier_id: int) -> Optional[Courier]:
        for courier in self.couriers:
            if courier.id == courier_id:
                return courier
        return None

    def _patch_courier(self, courier: Courier) -> None:
        if self._courier(courier.id) is None:
            self.couriers = [*self.couriers, courier]
        else:
            self.couriers = [courier if c.id == courier.id else c for c in self.couriers]
