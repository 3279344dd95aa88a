"""
Vehicles module exceptions.
"""

from logistics_console.shared.exceptions import ValidationError


class VehicleAssignedError(ValidationError):
    """Raised when an assigned vehicle is deleted or assigned again."""

    def __init__(self, immatriculation: str):
        super().__init__(
            "Ce véhicule est actuellement associé à un transporteur.",
            code="VEHICLE_ASSIGNED",
            details={"immatriculation": immatriculation},
        )
