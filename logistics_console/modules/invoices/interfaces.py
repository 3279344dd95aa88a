"""
Invoices module interface.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Invoice, InvoicePayload, InvoiceStatusUpdate, PaymentStatus


@runtime_checkable
class IInvoiceService(Protocol):
    """Interface for invoice operations."""

    async def list(self) -> list[Invoice]:
        ...

    async def get_by_id(self, invoice_id: int) -> Invoice:
        ...

    async def create(self, payload: InvoicePayload) -> Invoice:
        """
        Create an invoice for a courier.

        The courier must be delivered; the invoice screen checks this
        before calling.
        """
        ...

    async def update(self, invoice_id: int, payload: InvoiceStatusUpdate) -> Invoice:
        """Same as update_status: the payment status is all that changes."""
        ...

    async def update_status(self, invoice_id: int, status: PaymentStatus) -> Invoice:
        ...

    async def delete(self, invoice_id: int) -> None:
        ...

    async def download_pdf(self, invoice_id: int) -> bytes:
        """The invoice rendered as a PDF document."""
        ...
