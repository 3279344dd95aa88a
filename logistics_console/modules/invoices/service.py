"""
Invoice service implementation.
"""

from __future__ import annotations

import logging

from logistics_console.shared.service import BaseApiService

from .interfaces import IInvoiceService
from .models import Invoice, InvoicePayload, InvoiceStatusUpdate, PaymentStatus

logger = logging.getLogger(__name__)

ITEM_ENDPOINT = "/courriers/facture"
LIST_ENDPOINT = "/courriers/factures/all"
CREATE_ENDPOINT = "/courriers/facture/create"


class InvoiceService(BaseApiService[Invoice], IInvoiceService):
    """Invoice operations against the /courriers/facture endpoints."""

    async def list(self) -> list[Invoice]:
        return await self.fetch_many(Invoice, LIST_ENDPOINT)

    async def get_by_id(self, invoice_id: int) -> Invoice:
        return await self.fetch_one(Invoice, f"{ITEM_ENDPOINT}/{invoice_id}")

    async def create(self, payload: InvoicePayload) -> Invoice:
        invoice = await self.send_one("POST", Invoice, CREATE_ENDPOINT, payload.to_wire())
        logger.info(f"Created invoice {invoice.id} for courier {invoice.courier_id}")
        return invoice

    async def update(self, invoice_id: int, payload: InvoiceStatusUpdate) -> Invoice:
        return await self.update_status(invoice_id, payload.payment_status)

    async def update_status(self, invoice_id: int, status: PaymentStatus) -> Invoice:
        return await self.send_one(
            "PUT",
            Invoice,
            f"{ITEM_ENDPOINT}/{invoice_id}/status",
            InvoiceStatusUpdate(payment_status=status).to_wire(),
        )

    async def delete(self, invoice_id: int) -> None:
        await self._api.delete(f"{ITEM_ENDPOINT}/{invoice_id}")
        logger.info(f"Deleted invoice {invoice_id}")

    async def download_pdf(self, invoice_id: int) -> bytes:
        return await self._api.get_bytes(f"{ITEM_ENDPOINT}/{invoice_id}/pdf")
