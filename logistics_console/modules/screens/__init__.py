"""
Entity management screens.

Public API:
- EntityScreen: Base class (in-memory list, search, generation-guarded loads)
- Notifier, LoggingNotifier: Action outcome reporting
- AgencyScreen, VehicleScreen, EmployeeScreen, CourierScreen,
  DeliveryScreen, InvoiceScreen: One screen per entity
- EmployeeFormState: Role-driven employee form state
"""

from .notifier import Notifier, LoggingNotifier
from .base import EntityScreen, matches
from .agency import AgencyScreen
from .vehicle import VehicleScreen
from .employee import EmployeeScreen, EmployeeFormState
from .courier import CourierScreen
from .delivery import DeliveryScreen
from .invoice import InvoiceScreen

__all__ = [
    "Notifier",
    "LoggingNotifier",
    "EntityScreen",
    "matches",
    "AgencyScreen",
    "VehicleScreen",
    "EmployeeScreen",
    "EmployeeFormState",
    "CourierScreen",
    "DeliveryScreen",
    "InvoiceScreen",
]
