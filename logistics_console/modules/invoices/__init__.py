"""
Invoices module.

Public API:
- IInvoiceService: Interface for invoice operations
- InvoiceService: Implementation over the /courriers/facture endpoints
- Invoice, InvoicePayload, InvoiceStatusUpdate, PaymentStatus: Models
"""

from .interfaces import IInvoiceService
from .models import Invoice, InvoicePayload, InvoiceStatusUpdate, PaymentStatus
from .service import InvoiceService

__all__ = [
    "IInvoiceService",
    "InvoiceService",
    "Invoice",
    "InvoicePayload",
    "InvoiceStatusUpdate",
    "PaymentStatus",
]
