"""
Courriers module interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Courier, CourierPayload, CourierStatus


@runtime_checkable
class ICourierService(Protocol):
    """Interface for courier operations."""

    async def list(self) -> list[Courier]:
        ...

    async def get_by_id(self, courier_id: int) -> Courier:
        ...

    async def create(self, payload: CourierPayload) -> Courier:
        """Create a courier together with its sender."""
        ...

    async def update(self, courier_id: int, payload: CourierPayload) -> Courier:
        ...

    async def delete(self, courier_id: int) -> None:
        ...

    async def list_by_status(self, status: CourierStatus) -> list[Courier]:
        ...

    async def change_status(self, courier_id: int, status: CourierStatus) -> Courier:
        """
        Set a courier's status as is.

        No lifecycle check is made; the delivery screen relies on this
        to revert a courier when its delivery is removed.
        """
        ...

    async def advance_status(self, courier_id: int, status: CourierStatus) -> Courier:
        """
        Move a courier to its next lifecycle step.

        Raises:
            InvalidStatusTransitionError: If `status` is not the step
                right after the courier's current status
        """
        ...
