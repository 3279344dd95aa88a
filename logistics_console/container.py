"""
Service container.

Wires the session, the access control, every entity service and the
screens around one ApiClient and one token store. Services are created
lazily on first access and cached for the container's lifetime.
"""

from typing import TYPE_CHECKING, Optional

import httpx

from logistics_console.shared.config import Settings, get_settings
from logistics_console.shared.http import ApiClient
from logistics_console.shared.storage import FileStorage, Storage

# Type checking imports for interfaces (avoids import cycles)
if TYPE_CHECKING:
    from logistics_console.modules.access.service import AccessControl
    from logistics_console.modules.agencies.interfaces import IAgencyService
    from logistics_console.modules.auth.session import SessionManager
    from logistics_console.modules.auth.token_store import TokenStore
    from logistics_console.modules.courriers.interfaces import ICourierService
    from logistics_console.modules.deliveries.interfaces import IDeliveryService
    from logistics_console.modules.employees.interfaces import IEmployeeService
    from logistics_console.modules.invoices.interfaces import IInvoiceService
    from logistics_console.modules.labels.interfaces import ILabelService
    from logistics_console.modules.screens.notifier import Notifier
    from logistics_console.modules.vehicles.interfaces import IVehicleService
    from logistics_console.modules.screens import (
        AgencyScreen,
        CourierScreen,
        DeliveryScreen,
        EmployeeScreen,
        InvoiceScreen,
        VehicleScreen,
    )


class ServiceContainer:
    """
    Container for all service instances.

    Pass `storage` and `transport` to run against an in-memory store and
    a fake backend. Call aclose() (or use `async with`) to release the
    HTTP connection pool.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        storage: Optional[Storage] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        notifier: "Optional[Notifier]" = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._storage = storage
        self._transport = transport
        self._notifier = notifier

        self._api: Optional[ApiClient] = None
        self._token_store: "Optional[TokenStore]" = None
        self._session: "Optional[SessionManager]" = None
        self._access: "Optional[AccessControl]" = None
        self._agencies: "Optional[IAgencyService]" = None
        self._vehicles: "Optional[IVehicleService]" = None
        self._employees: "Optional[IEmployeeService]" = None
        self._couriers: "Optional[ICourierService]" = None
        self._deliveries: "Optional[IDeliveryService]" = None
        self._invoices: "Optional[IInvoiceService]" = None
        self._labels: "Optional[ILabelService]" = None

    async def __aenter__(self) -> "ServiceContainer":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    @property
    def api(self) -> ApiClient:
        if self._api is None:
            self._api = ApiClient(
                base_url=self.settings.api_base_url,
                timeout=self.settings.request_timeout,
                transport=self._transport,
            )
        return self._api

    @property
    def token_store(self) -> "TokenStore":
        if self._token_store is None:
            from logistics_console.modules.auth.token_store import TokenStore
            storage = self._storage or FileStorage(self.settings.storage_path)
            self._token_store = TokenStore(
                storage,
                token_key=self.settings.token_key,
                user_key=self.settings.user_key,
            )
        return self._token_store

    @property
    def session(self) -> "SessionManager":
        """The session manager; it registers itself on the ApiClient."""
        if self._session is None:
            from logistics_console.modules.auth.session import SessionManager
            self._session = SessionManager(self.api, self.token_store)
        return self._session

    @property
    def access(self) -> "AccessControl":
        if self._access is None:
            from logistics_console.modules.access.service import AccessControl
            self._access = AccessControl(self.settings)
        return self._access

    @property
    def agencies(self) -> "IAgencyService":
        if self._agencies is None:
            from logistics_console.modules.agencies.service import AgencyService
            self._agencies = AgencyService(self._authenticated_api())
        return self._agencies

    @property
    def vehicles(self) -> "IVehicleService":
        if self._vehicles is None:
            from logistics_console.modules.vehicles.service import VehicleService
            self._vehicles = VehicleService(self._authenticated_api())
        return self._vehicles

    @property
    def employees(self) -> "IEmployeeService":
        if self._employees is None:
            from logistics_console.modules.employees.service import EmployeeService
            self._employees = EmployeeService(self._authenticated_api(), vehicles=self.vehicles)
        return self._employees

    @property
    def couriers(self) -> "ICourierService":
        if self._couriers is None:
            from logistics_console.modules.courriers.service import CourierService
            self._couriers = CourierService(self._authenticated_api())
        return self._couriers

    @property
    def deliveries(self) -> "IDeliveryService":
        if self._deliveries is None:
            from logistics_console.modules.deliveries.service import DeliveryService
            self._deliveries = DeliveryService(self._authenticated_api())
        return self._deliveries

    @property
    def invoices(self) -> "IInvoiceService":
        if self._invoices is None:
            from logistics_console.modules.invoices.service import InvoiceService
            self._invoices = InvoiceService(self._authenticated_api())
        return self._invoices

    @property
    def labels(self) -> "ILabelService":
        if self._labels is None:
            from logistics_console.modules.labels.service import LabelService
            self._labels = LabelService(self._authenticated_api())
        return self._labels

    # Screens are cheap and stateful: each call returns a fresh one.

    def agency_screen(self) -> "AgencyScreen":
        from logistics_console.modules.screens import AgencyScreen
        return AgencyScreen(self.agencies, self._notifier)

    def vehicle_screen(self) -> "VehicleScreen":
        from logistics_console.modules.screens import VehicleScreen
        return VehicleScreen(self.vehicles, self.agencies, self._notifier)

    def employee_screen(self) -> "EmployeeScreen":
        from logistics_console.modules.screens import EmployeeScreen
        return EmployeeScreen(self.employees, self.agencies, self.vehicles, self._notifier)

    def courier_screen(self) -> "CourierScreen":
        from logistics_console.modules.screens import CourierScreen
        return CourierScreen(self.couriers, self._notifier)

    def delivery_screen(self) -> "DeliveryScreen":
        from logistics_console.modules.screens import DeliveryScreen
        return DeliveryScreen(
            self.deliveries, self.couriers, self.vehicles, self.employees, self._notifier
        )

    def invoice_screen(self) -> "InvoiceScreen":
        from logistics_console.modules.screens import InvoiceScreen
        return InvoiceScreen(self.invoices, self.couriers, self._notifier)

    def _authenticated_api(self) -> ApiClient:
        # Entity requests need the session's token provider and 401 handler
        self.session
        return self.api

    async def aclose(self) -> None:
        if self._api is not None:
            await self._api.aclose()

    def reset(self) -> None:
        """
        Drop every cached instance.

        Primarily for testing. Does not close the ApiClient; call aclose()
        first if one was created.
        """
        self._api = None
        self._token_store = None
        self._session = None
        self._access = None
        self._agencies = None
        self._vehicles = None
        self._employees = None
        self._couriers = None
        self._deliveries = None
        self._invoices = None
        self._labels = None


# Module-level container singleton
_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() builds a fresh one. Primarily used
    for testing.
    """
    global _container
    _container = None
