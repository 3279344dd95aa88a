"""
Base service class for backend access.

Provides the common layer every entity service builds on: the shared
ApiClient and the envelope parsing helpers bound to it.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from .envelope import parse_list, parse_object
from .http import ApiClient


T = TypeVar("T", bound=BaseModel)
M = TypeVar("M", bound=BaseModel)


class BaseApiService(Generic[T]):
    """
    Base class for all entity services.

    Provides common functionality for backend operations:
    - ApiClient access via self._api
    - Generic type parameter for the entity model

    Subclasses implement the entity's endpoints and map responses to
    their models through the fetch_* helpers, which fail loudly on
    unrecognized shapes.

    Example:
        class VehicleService(BaseApiService[Vehicle]):
            async def get_by_id(self, key: str) -> Vehicle:
                return await self.fetch_one(Vehicle, f"/vehicule/{key}")
    """

    def __init__(self, api: ApiClient) -> None:
        """
        Initialize the service with an ApiClient.

        Args:
            api: Client used for every request of this service.
        """
        self._api = api

    async def fetch_many(self, model: type[M], endpoint: str, **kwargs: Any) -> list[M]:
        payload = await self._api.get(endpoint, **kwargs)
        return parse_list(model, payload, endpoint)

    async def fetch_one(self, model: type[M], endpoint: str, **kwargs: Any) -> M:
        payload = await self._api.get(endpoint, **kwargs)
        return parse_object(model, payload, endpoint)

    async def send_one(
        self,
        method: str,
        model: type[M],
        endpoint: str,
        body: Any = None,
        **kwargs: Any,
    ) -> M:
        payload = await self._api.request(method, endpoint, json=body, **kwargs)
        return parse_object(model, payload, endpoint)
