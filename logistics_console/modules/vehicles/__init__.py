"""
Vehicles module.

Public API:
- IVehicleService: Interface for vehicle operations
- VehicleService: Implementation over the /vehicule endpoints
- Vehicle, VehiclePayload, TransporterRef: Models
- VehicleAssignedError: Raised for vehicles still assigned to a transporter
"""

from .interfaces import IVehicleService
from .models import Vehicle, VehiclePayload, TransporterRef
from .exceptions import VehicleAssignedError
from .service import VehicleService

__all__ = [
    "IVehicleService",
    "VehicleService",
    "Vehicle",
    "VehiclePayload",
    "TransporterRef",
    "VehicleAssignedError",
]
