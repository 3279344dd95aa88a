"""
Agencies module interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Agency, AgencyDetails, AgencyPayload, AgencyStats


@runtime_checkable
class IAgencyService(Protocol):
    """
    Interface for agency operations.

    Agencies are keyed by the identifier the listing hands out; the
    details endpoint accepts the same key.
    """

    async def list(self) -> list[Agency]:
        """
        List every agency with its employees and vehicles.

        Detail fetches run concurrently; an agency whose details cannot
        be fetched is returned as a placeholder rather than failing the
        whole listing.
        """
        ...

    async def get_by_id(self, key: str) -> Agency:
        """
        Get one agency with its employees and vehicles.

        Raises:
            NotFoundError: If the agency doesn't exist
        """
        ...

    async def get_details(self, key: str) -> AgencyDetails:
        """Fetch the live details DTO of an agency."""
        ...

    async def create(self, payload: AgencyPayload) -> Agency:
        """Create an agency (created without employees or vehicles)."""
        ...

    async def update(self, key: str, payload: AgencyPayload) -> Agency:
        """Rename or move an agency."""
        ...

    async def delete(self, key: str) -> None:
        """
        Delete an agency.

        Raises:
            HasDependentsError: If live details show employees or vehicles;
                no delete request is sent in that case
            NotFoundError: If the backend has no details for `key`; the
                dependents check cannot run, so nothing is deleted
        """
        ...

    async def get_stats(self, key: str) -> AgencyStats:
        """Employee and vehicle counts of an agency."""
        ...
