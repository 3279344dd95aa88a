"""
Deliveries module.

Public API:
- IDeliveryService: Interface for delivery operations
- DeliveryService: Implementation over the /courriers/livraison endpoints
- Delivery, DeliveryPayload: Models
"""

from .interfaces import IDeliveryService
from .models import Delivery, DeliveryPayload
from .service import DeliveryService

__all__ = [
    "IDeliveryService",
    "DeliveryService",
    "Delivery",
    "DeliveryPayload",
]
