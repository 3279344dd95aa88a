"""
Courriers module.

Public API:
- ICourierService: Interface for courier operations
- CourierService: Implementation over the /courriers endpoints
- Courier, CourierPayload, CourierStatus, Client: Models
- InvalidStatusTransitionError, CourierNotDeliveredError: Lifecycle errors
"""

from .interfaces import ICourierService
from .models import (
    Client,
    Courier,
    CourierPayload,
    CourierStatus,
    LIFECYCLE,
    STATUS_LABELS,
    next_status,
)
from .exceptions import InvalidStatusTransitionError, CourierNotDeliveredError
from .service import CourierService

__all__ = [
    "ICourierService",
    "CourierService",
    "Client",
    "Courier",
    "CourierPayload",
    "CourierStatus",
    "LIFECYCLE",
    "STATUS_LABELS",
    "next_status",
    "InvalidStatusTransitionError",
    "CourierNotDeliveredError",
]
