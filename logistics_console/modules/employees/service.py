"""
Employee service implementation.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from logistics_console.modules.auth.models import RoleEntity
from logistics_console.modules.vehicles.exceptions import VehicleAssignedError
from logistics_console.modules.vehicles.interfaces import IVehicleService
from logistics_console.modules.vehicles.service import VehicleService
from logistics_console.shared.http import ApiClient
from logistics_console.shared.service import BaseApiService

from .forms import EmployeeForm, OperatorForm, TransporterForm
from .interfaces import IEmployeeService
from .models import Employee

logger = logging.getLogger(__name__)

BASE_ENDPOINT = "/employe"
FIND_ENDPOINT = "/employe/find"
CREATE_ENDPOINT = "/employe/create"
CREATE_WITH_USER_ENDPOINT = "/utilisateur/create-with-employe"
ROLES_ENDPOINT = "/roles"


class EmployeeService(BaseApiService[Employee], IEmployeeService):
    """Employee CRUD against the /employe endpoints."""

    def __init__(self, api: ApiClient, vehicles: Optional[IVehicleService] = None) -> None:
        super().__init__(api)
        self._vehicles = vehicles or VehicleService(api)

    async def list(self) -> list[Employee]:
        return await self.fetch_many(Employee, BASE_ENDPOINT)

    async def get_by_id(self, cin: str) -> Employee:
        return await self.fetch_one(Employee, f"{FIND_ENDPOINT}/{cin}")

    async def create(self, form: EmployeeForm) -> Employee:
        await self._check_vehicle(form)
        if isinstance(form, OperatorForm):
            employee = await self.send_one(
                "POST", Employee, CREATE_WITH_USER_ENDPOINT, self._with_user(form)
            )
        else:
            employee = await self.send_one(
                "POST", Employee, CREATE_ENDPOINT, form.employee_payload()
            )
        logger.info(f"Created employee {employee.cin} ({form.kind})")
        return employee

    async def update(self, cin: str, form: EmployeeForm) -> Employee:
        await self._check_vehicle(form, cin=cin)
        if isinstance(form, OperatorForm):
            return await self.send_one(
                "PUT", Employee, f"{BASE_ENDPOINT}/{cin}/with-user", self._with_user(form)
            )
        return await self.send_one(
            "PUT", Employee, f"{BASE_ENDPOINT}/{cin}", form.employee_payload()
        )

    async def delete(self, cin: str) -> None:
        await self._api.delete(f"{BASE_ENDPOINT}/{cin}")
        logger.info(f"Deleted employee {cin}")

    async def list_roles(self) -> list[RoleEntity]:
        return await self.fetch_many(RoleEntity, ROLES_ENDPOINT)

    async def list_by_agency(self, agency_id: str) -> list[Employee]:
        return await self.fetch_many(Employee, f"{BASE_ENDPOINT}/agence/{agency_id}")

    async def list_by_role(self, role_id: int) -> list[Employee]:
        return await self.fetch_many(Employee, f"{BASE_ENDPOINT}/role/{role_id}")

    async def assign_vehicle(self, cin: str, immatriculation: str) -> Employee:
        if not await self._vehicles.is_vehicle_available(immatriculation):
            raise VehicleAssignedError(immatriculation)
        return await self.send_one(
            "PUT", Employee, f"{BASE_ENDPOINT}/{cin}/vehicule/{immatriculation}"
        )

    async def release_vehicle(self, cin: str) -> Employee:
        return await self.send_one("DELETE", Employee, f"{BASE_ENDPOINT}/{cin}/vehicule")

    @staticmethod
    def _with_user(form: OperatorForm) -> dict[str, Any]:
        return {
            "employe": form.employee_payload(),
            "utilisateur": form.user_payload(),
        }

    async def _check_vehicle(self, form: EmployeeForm, cin: Optional[str] = None) -> None:
        if not isinstance(form, TransporterForm) or not form.vehicle_immatriculation:
            return
        vehicle = await self._vehicles.get_by_id(form.vehicle_immatriculation)
        if vehicle.is_available:
            return
        # Keeping the vehicle it already drives is not a reassignment
        if cin is not None and vehicle.assigned_transporter.cin == cin:
            return
        raise VehicleAssignedError(form.vehicle_immatriculation)
