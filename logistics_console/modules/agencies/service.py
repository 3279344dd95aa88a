"""
Agency service implementation.

Listing is a two-step fan-out: GET /agence/all returns the agency
addresses, then every address's details are fetched concurrently.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from logistics_console.shared.envelope import parse_optional_object, unwrap_list
from logistics_console.shared.exceptions import MalformedResponseError, NotFoundError, UnauthorizedError
from logistics_console.shared.service import BaseApiService

from .exceptions import HasDependentsError
from .interfaces import IAgencyService
from .models import Agency, AgencyDetails, AgencyPayload, AgencyStats

logger = logging.getLogger(__name__)

ADDRESSES_ENDPOINT = "/agence/all"
DETAILS_ENDPOINT = "/agence/details"
CREATE_ENDPOINT = "/agence/create"
UPDATE_ENDPOINT = "/agence/update"
DELETE_ENDPOINT = "/agence/delete"
STATS_ENDPOINT = "/agence/stats"


def _address_of(item: Any) -> str:
    """Address list entries are plain strings, or agency objects in older versions."""
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        address = item.get("adresse_agence") or item.get("adresse")
        if address:
            return str(address)
    raise MalformedResponseError(ADDRESSES_ENDPOINT, f"unrecognized address entry: {item!r}")


def placeholder_agency(address: str, position: int) -> Agency:
    """Stand-in for an agency whose details could not be fetched."""
    return Agency(
        id=str(position + 1),
        name=address,
        address=address,
        is_placeholder=True,
    )


class AgencyService(BaseApiService[Agency], IAgencyService):
    """Agency CRUD against the /agence endpoints."""

    async def list(self) -> list[Agency]:
        payload = await self._api.get(ADDRESSES_ENDPOINT)
        addresses = [_address_of(item) for item in unwrap_list(payload, ADDRESSES_ENDPOINT)]

        results = await asyncio.gather(
            *(self.get_details(address) for address in addresses),
            return_exceptions=True,
        )

        agencies: list[Agency] = []
        for position, (address, result) in enumerate(zip(addresses, results)):
            if isinstance(result, UnauthorizedError):
                # The session is gone; placeholders would only hide that
                raise result
            if isinstance(result, BaseException):
                if not isinstance(result, Exception):
                    raise result
                logger.warning(
                    f"Could not fetch details for agency at {address!r}, "
                    f"using a placeholder: {result!r}"
                )
                agencies.append(placeholder_agency(address, position))
                continue
            agencies.append(self._from_details(result, key=address))
        return agencies

    async def get_by_id(self, key: str) -> Agency:
        details = await self.get_details(key)
        return self._from_details(details, key=key)

    async def get_details(self, key: str) -> AgencyDetails:
        endpoint = f"{DETAILS_ENDPOINT}/{key}"
        payload = await self._api.get(endpoint)
        details = parse_optional_object(AgencyDetails, payload, endpoint)
        if details is None:
            raise NotFoundError(
                f"Agence non trouvée : {key}",
                details={"agency_id": key},
            )
        return details

    async def create(self, payload: AgencyPayload) -> Agency:
        stats = await self.send_one("POST", AgencyStats, CREATE_ENDPOINT, payload.to_wire())
        logger.info(f"Created agency {stats.id}")
        return self._from_stats(stats, payload)

    async def update(self, key: str, payload: AgencyPayload) -> Agency:
        stats = await self.send_one(
            "PUT", AgencyStats, f"{UPDATE_ENDPOINT}/{key}", payload.to_wire()
        )
        return self._from_stats(stats, payload)

    async def delete(self, key: str) -> None:
        details = await self.get_details(key)
        if details.has_dependents:
            raise HasDependentsError(
                key,
                employee_count=len(details.employees),
                vehicle_count=len(details.vehicles),
            )

        await self._api.delete(f"{DELETE_ENDPOINT}/{key}")
        logger.info(f"Deleted agency {key}")

    async def get_stats(self, key: str) -> AgencyStats:
        return await self.fetch_one(AgencyStats, f"{STATS_ENDPOINT}/{key}")

    @staticmethod
    def _from_details(details: AgencyDetails, key: str) -> Agency:
        return Agency(
            id=key,
            record_id=details.id,
            name=details.name,
            address=key,
            employees=details.employees,
            vehicles=details.vehicles,
        )

    @staticmethod
    def _from_stats(stats: AgencyStats, payload: AgencyPayload) -> Agency:
        # Freshly created or updated: details are loaded when the agency is opened
        address = stats.address or payload.address
        return Agency(id=address, record_id=stats.id, name=stats.name, address=address)
