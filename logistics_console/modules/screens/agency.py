"""
Agency management screen.
"""

from typing import Any, Iterable, Optional

from logistics_console.modules.agencies import (
    Agency,
    AgencyPayload,
    HasDependentsError,
    IAgencyService,
)

from .base import EntityScreen
from .notifier import Notifier


class AgencyScreen(EntityScreen[Agency]):
    entity_label = "agence"

    def __init__(self, agencies: IAgencyService, notifier: Optional[Notifier] = None) -> None:
        super().__init__(notifier)
        self._agencies = agencies

    def key_of(self, item: Agency) -> str:
        return item.id

    def search_fields(self, item: Agency) -> Iterable[Any]:
        return (item.name, item.address)

    async def _fetch(self) -> tuple[list[Agency], dict[str, Any]]:
        return await self._agencies.list(), {}

    async def create(self, payload: AgencyPayload) -> Optional[Agency]:
        async def action() -> Agency:
            agency = await self._agencies.create(payload)
            self._append(agency)
            return agency

        return await self._run(action, "Agence créée avec succès")

    async def update(self, key: str, payload: AgencyPayload) -> Optional[Agency]:
        async def action() -> Agency:
            updated = await self._agencies.update(key, payload)
            # The update DTO carries no details; keep the ones already listed
            current = self.find(key)
            if current is not None:
                updated = updated.model_copy(
                    update={"employees": current.employees, "vehicles": current.vehicles}
                )
            self._replace_key(key, updated)
            return updated

        return await self._run(action, "Agence mise à jour avec succès")

    async def delete(self, key: str) -> bool:
        async def action() -> bool:
            current = self.find(key)
            if current is not None and current.has_dependents:
                raise HasDependentsError(
                    key,
                    employee_count=len(current.employees),
                    vehicle_count=len(current.vehicles),
                )
            await self._agencies.delete(key)
            self._remove(key)
            return True

        return bool(await self._run(action, "Agence supprimée avec succès"))

    def _replace_key(self, key: str, item: Agency) -> None:
        self._next_generation()
        self.items = [item if existing.id == key else existing for existing in self.items]
