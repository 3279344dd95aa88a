"""
Courier management screen.
"""

from typing import Any, Iterable, Optional

from logistics_console.modules.courriers import (
    Courier,
    CourierPayload,
    CourierStatus,
    ICourierService,
)

from .base import EntityScreen
from .notifier import Notifier


class CourierScreen(EntityScreen[Courier]):
    entity_label = "courrier"

    def __init__(self, couriers: ICourierService, notifier: Optional[Notifier] = None) -> None:
        super().__init__(notifier)
        self._couriers = couriers

    def key_of(self, item: Courier) -> int:
        return item.id

    def search_fields(self, item: Courier) -> Iterable[Any]:
        sender = item.sender
        return (
            sender.name if sender else None,
            sender.surname if sender else None,
            item.recipient_cin,
            item.recipient_name,
        )

    async def _fetch(self) -> tuple[list[Courier], dict[str, Any]]:
        return await self._couriers.list(), {}

    def by_status(self, status: CourierStatus) -> list[Courier]:
        return [item for item in self.items if item.status is status]

    async def create(self, payload: CourierPayload) -> Optional[Courier]:
        async def action() -> Courier:
            courier = await self._couriers.create(payload)
            self._append(courier)
            return courier

        return await self._run(action, "Courrier créé avec succès")

    async def update(self, courier_id: int, payload: CourierPayload) -> Optional[Courier]:
        async def action() -> Courier:
            courier = await self._couriers.update(courier_id, payload)
            self._replace(courier)
            return courier

        return await self._run(action, "Courrier mis à jour avec succès")

    async def delete(self, courier_id: int) -> bool:
        async def action() -> bool:
            await self._couriers.delete(courier_id)
            self._remove(courier_id)
            return True

        return bool(await self._run(action, "Courrier supprimé avec succès"))

    async def advance(self, courier_id: int, status: CourierStatus) -> Optional[Courier]:
        """Move a courier one step forward in its lifecycle."""

        async def action() -> Courier:
            courier = await self._couriers.advance_status(courier_id, status)
            self._replace(courier)
            return courier

        return await self._run(action, "Statut mis à jour avec succès")
