"""
Agencies module exceptions.
"""

from logistics_console.shared.exceptions import ValidationError


class HasDependentsError(ValidationError):
    """Raised when deleting an agency that still has employees or vehicles."""

    def __init__(self, agency_id: str, employee_count: int, vehicle_count: int):
        super().__init__(
            "Impossible de supprimer cette agence car elle contient "
            "des employés ou des véhicules.",
            code="HAS_DEPENDENTS",
            details={
                "agency_id": agency_id,
                "employee_count": employee_count,
                "vehicle_count": vehicle_count,
            },
        )
