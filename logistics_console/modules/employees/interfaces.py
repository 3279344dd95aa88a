"""
Employees module interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from logistics_console.modules.auth.models import RoleEntity

from .forms import EmployeeForm
from .models import Employee


@runtime_checkable
class IEmployeeService(Protocol):
    """Interface for employee operations, keyed by CIN."""

    async def list(self) -> list[Employee]:
        ...

    async def get_by_id(self, cin: str) -> Employee:
        """
        Get an employee.

        Raises:
            NotFoundError: If no employee has this CIN
        """
        ...

    async def create(self, form: EmployeeForm) -> Employee:
        """
        Create an employee from a role-tagged form.

        Operator forms create the login account in the same request.

        Raises:
            VehicleAssignedError: If a transporter form names a vehicle
                that is already assigned
        """
        ...

    async def update(self, cin: str, form: EmployeeForm) -> Employee:
        ...

    async def delete(self, cin: str) -> None:
        ...

    async def list_roles(self) -> list[RoleEntity]:
        ...

    async def list_by_agency(self, agency_id: str) -> list[Employee]:
        ...

    async def list_by_role(self, role_id: int) -> list[Employee]:
        ...

    async def assign_vehicle(self, cin: str, immatriculation: str) -> Employee:
        """
        Assign a vehicle to a transporter.

        Raises:
            VehicleAssignedError: If the vehicle is already assigned
        """
        ...

    async def release_vehicle(self, cin: str) -> Employee:
        """Remove the vehicle assigned to a transporter."""
        ...
