"""
Employee management screen.

Besides the employee list, the screen loads the agencies, roles and
available vehicles its form picks from. The form's shape follows the
selected role through EmployeeFormState.
"""

import asyncio
from typing import Any, Iterable, Optional

from logistics_console.modules.agencies import Agency, IAgencyService
from logistics_console.modules.auth.models import Role, RoleEntity
from logistics_console.modules.employees import (
    Employee,
    EmployeeForm,
    IEmployeeService,
    build_form,
    visible_fields_for,
)
from logistics_console.modules.vehicles import IVehicleService, Vehicle

from .base import EntityScreen, matches
from .notifier import Notifier


class EmployeeFormState:
    """
    Reactive state of the employee form.

    Selecting a role decides which fields are shown: email and password
    for operators, the vehicle picker for transporters.
    """

    def __init__(self, roles: list[RoleEntity], available_vehicles: list[Vehicle]):
        self.roles = roles
        self.available_vehicles = available_vehicles
        self.selected_role: Optional[RoleEntity] = None

    def select_role(self, role_id: int) -> RoleEntity:
        for role in self.roles:
            if role.id == role_id:
                self.selected_role = role
                return role
        raise KeyError(f"Unknown role id: {role_id}")

    @property
    def role(self) -> Optional[Role]:
        return self.selected_role.role if self.selected_role else None

    @property
    def visible_fields(self) -> tuple[str, ...]:
        return visible_fields_for(self.role)

    @property
    def shows_account_fields(self) -> bool:
        return self.role is Role.OPERATEUR

    @property
    def shows_vehicle_picker(self) -> bool:
        return self.role is Role.TRANSPORTEUR

    @property
    def vehicle_options(self) -> list[Vehicle]:
        """Only vehicles without a transporter are offered."""
        if not self.shows_vehicle_picker:
            return []
        return [vehicle for vehicle in self.available_vehicles if vehicle.is_available]

    def build(self, **values: Any) -> EmployeeForm:
        """
        Build the form variant of the selected role.

        Raises:
            ValueError: If no role is selected
            pydantic.ValidationError: If the values are invalid
        """
        if self.selected_role is None:
            raise ValueError("A role must be selected first")
        return build_form(self.selected_role, **values)


class EmployeeScreen(EntityScreen[Employee]):
    entity_label = "employé"

    def __init__(
        self,
        employees: IEmployeeService,
        agencies: IAgencyService,
        vehicles: IVehicleService,
        notifier: Optional[Notifier] = None,
    ) -> None:
        super().__init__(notifier)
        self._employees = employees
        self._agencies = agencies
        self._vehicles = vehicles
        self.agencies: list[Agency] = []
        self.roles: list[RoleEntity] = []
        self.available_vehicles: list[Vehicle] = []
        self.role_filter: Optional[Role] = None

    def key_of(self, item: Employee) -> str:
        return item.cin

    def search_fields(self, item: Employee) -> Iterable[Any]:
        return (item.name, item.surname, item.cin)

    def search(self, query: str) -> list[Employee]:
        return [
            item
            for item in self.items
            if matches(query, self.search_fields(item))
            and (self.role_filter is None or item.role_name is self.role_filter)
        ]

    async def _fetch(self) -> tuple[list[Employee], dict[str, Any]]:
        employees, agencies, roles, vehicles = await asyncio.gather(
            self._employees.list(),
            self._agencies.list(),
            self._employees.list_roles(),
            self._vehicles.list_available(),
        )
        return employees, {"agencies": agencies, "roles": roles, "vehicles": vehicles}

    def _commit(self, items: list[Employee], refs: dict[str, Any]) -> None:
        super()._commit(items, refs)
        self.agencies = refs["agencies"]
        self.roles = refs["roles"]
        self.available_vehicles = refs["vehicles"]

    def form_state(self) -> EmployeeFormState:
        return EmployeeFormState(self.roles, self.available_vehicles)

    async def create(self, form: EmployeeForm) -> Optional[Employee]:
        async def action() -> Employee:
            employee = await self._employees.create(form)
            self._append(employee)
            await self._refresh_vehicles(form)
            return employee

        return await self._run(action, "Employé créé avec succès")

    async def update(self, cin: str, form: EmployeeForm) -> Optional[Employee]:
        async def action() -> Employee:
            employee = await self._employees.update(cin, form)
            self._replace(employee)
            await self._refresh_vehicles(form)
            return employee

        return await self._run(action, "Employé mis à jour avec succès")

    async def delete(self, cin: str) -> bool:
        async def action() -> bool:
            current = self.find(cin)
            await self._employees.delete(cin)
            self._remove(cin)
            if current is not None and current.assigned_vehicle is not None:
                self.available_vehicles = await self._vehicles.list_available()
            return True

        return bool(await self._run(action, "Employé supprimé avec succès"))

    async def _refresh_vehicles(self, form: EmployeeForm) -> None:
        if form.kind == Role.TRANSPORTEUR.value:
            self.available_vehicles = await self._vehicles.list_available()
