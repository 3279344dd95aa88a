"""
Vehicles module interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Vehicle, VehiclePayload


@runtime_checkable
class IVehicleService(Protocol):
    """Interface for vehicle operations, keyed by immatriculation."""

    async def list(self) -> list[Vehicle]:
        """List all vehicles."""
        ...

    async def get_by_id(self, immatriculation: str) -> Vehicle:
        """
        Get a vehicle.

        Raises:
            NotFoundError: If no vehicle has this immatriculation
        """
        ...

    async def create(self, payload: VehiclePayload) -> Vehicle:
        ...

    async def update(self, immatriculation: str, payload: VehiclePayload) -> Vehicle:
        ...

    async def delete(self, immatriculation: str) -> None:
        """
        Delete a vehicle.

        Raises:
            VehicleAssignedError: If a transporter is assigned; no delete
                request is sent in that case
        """
        ...

    async def is_vehicle_available(self, immatriculation: str) -> bool:
        """True when no transporter is assigned to the vehicle."""
        ...

    async def list_available(self) -> list[Vehicle]:
        """Vehicles that can be offered in an assignment picker."""
        ...

    async def list_by_agency(self, agency_id: str) -> list[Vehicle]:
        ...

    async def list_immatriculations(self) -> list[str]:
        ...
