"""
Courriers module exceptions.
"""

from typing import Optional

from logistics_console.shared.exceptions import ValidationError

from .models import CourierStatus, STATUS_LABELS


class InvalidStatusTransitionError(ValidationError):
    """Raised when a courier is moved anywhere but to its next lifecycle step."""

    def __init__(
        self,
        courier_id: int,
        current: CourierStatus,
        requested: CourierStatus,
        expected: Optional[CourierStatus] = None,
    ):
        super().__init__(
            f"Transition de statut invalide : "
            f"{STATUS_LABELS[current]} -> {STATUS_LABELS[requested]}",
            code="INVALID_STATUS_TRANSITION",
            details={
                "courier_id": courier_id,
                "current": current.value,
                "requested": requested.value,
                "expected": expected.value if expected else None,
            },
        )
        self.current = current
        self.requested = requested


class CourierNotDeliveredError(ValidationError):
    """Raised when invoicing a courier that has not been delivered."""

    def __init__(self, courier_id: int, status: CourierStatus):
        super().__init__(
            "Une facture ne peut être créée que pour un courrier livré.",
            code="COURIER_NOT_DELIVERED",
            details={"courier_id": courier_id, "status": status.value},
        )
        self.status = status
