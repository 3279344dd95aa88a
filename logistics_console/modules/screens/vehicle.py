"""
Vehicle management screen.
"""

import asyncio
from typing import Any, Iterable, Optional

from logistics_console.modules.agencies import Agency, IAgencyService
from logistics_console.modules.vehicles import (
    IVehicleService,
    Vehicle,
    VehicleAssignedError,
    VehiclePayload,
)

from .base import EntityScreen
from .notifier import Notifier


class VehicleScreen(EntityScreen[Vehicle]):
    """Vehicles, with the agencies their form picks from."""

    entity_label = "véhicule"

    def __init__(
        self,
        vehicles: IVehicleService,
        agencies: IAgencyService,
        notifier: Optional[Notifier] = None,
    ) -> None:
        super().__init__(notifier)
        self._vehicles = vehicles
        self._agencies = agencies
        self.agencies: list[Agency] = []

    def key_of(self, item: Vehicle) -> str:
        return item.immatriculation

    def search_fields(self, item: Vehicle) -> Iterable[Any]:
        return (item.immatriculation, item.type)

    async def _fetch(self) -> tuple[list[Vehicle], dict[str, Any]]:
        vehicles, agencies = await asyncio.gather(self._vehicles.list(), self._agencies.list())
        return vehicles, {"agencies": agencies}

    def _commit(self, items: list[Vehicle], refs: dict[str, Any]) -> None:
        super()._commit(items, refs)
        self.agencies = refs["agencies"]

    @property
    def available(self) -> list[Vehicle]:
        return [vehicle for vehicle in self.items if vehicle.is_available]

    async def create(self, payload: VehiclePayload) -> Optional[Vehicle]:
        async def action() -> Vehicle:
            vehicle = await self._vehicles.create(payload)
            self._append(vehicle)
            return vehicle

        return await self._run(action, "Véhicule créé avec succès")

    async def update(self, immatriculation: str, payload: VehiclePayload) -> Optional[Vehicle]:
        async def action() -> Vehicle:
            vehicle = await self._vehicles.update(immatriculation, payload)
            self._replace(vehicle)
            return vehicle

        return await self._run(action, "Véhicule mis à jour avec succès")

    async def delete(self, immatriculation: str) -> bool:
        async def action() -> bool:
            current = self.find(immatriculation)
            if current is not None and not current.is_available:
                raise VehicleAssignedError(immatriculation)
            await self._vehicles.delete(immatriculation)
            self._remove(immatriculation)
            return True

        return bool(await self._run(action, "Véhicule supprimé avec succès"))
