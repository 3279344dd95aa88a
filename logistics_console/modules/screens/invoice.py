"""
Invoice management screen.
"""

import asyncio
from typing import Any, Iterable, Optional

from logistics_console.modules.courriers import (
    Courier,
    CourierNotDeliveredError,
    CourierStatus,
    ICourierService,
)
from logistics_console.modules.invoices import (
    IInvoiceService,
    Invoice,
    InvoicePayload,
    PaymentStatus,
)

from .base import EntityScreen
from .notifier import Notifier


class InvoiceScreen(EntityScreen[Invoice]):
    """Invoices, with the delivered couriers that can be invoiced."""

    entity_label = "facture"

    def __init__(
        self,
        invoices: IInvoiceService,
        couriers: ICourierService,
        notifier: Optional[Notifier] = None,
    ) -> None:
        super().__init__(notifier)
        self._invoices = invoices
        self._couriers = couriers
        self.couriers: list[Courier] = []

    def key_of(self, item: Invoice) -> int:
        return item.id

    def search_fields(self, item: Invoice) -> Iterable[Any]:
        return (item.id, item.courier_id, item.payment_status.value)

    async def _fetch(self) -> tuple[list[Invoice], dict[str, Any]]:
        invoices, couriers = await asyncio.gather(
            self._invoices.list(),
            self._couriers.list_by_status(CourierStatus.DELIVERED),
        )
        return invoices, {"couriers": couriers}

    def _commit(self, items: list[Invoice], refs: dict[str, Any]) -> None:
        super()._commit(items, refs)
        self.couriers = refs["couriers"]

    @property
    def courier_options(self) -> list[Courier]:
        return [courier for courier in self.couriers if courier.status is CourierStatus.DELIVERED]

    async def create(self, payload: InvoicePayload) -> Optional[Invoice]:
        async def action() -> Invoice:
            courier = await self._couriers.get_by_id(payload.courier_id)
            if courier.status is not CourierStatus.DELIVERED:
                raise CourierNotDeliveredError(courier.id, courier.status)
            invoice = await self._invoices.create(payload)
            self._append(invoice)
            return invoice

        return await self._run(action, "Facture créée avec succès")

    async def update_status(self, invoice_id: int, status: PaymentStatus) -> Optional[Invoice]:
        async def action() -> Invoice:
            invoice = await self._invoices.update_status(invoice_id, status)
            self._replace(invoice)
            return invoice

        return await self._run(action, "Statut de paiement mis à jour")

    async def delete(self, invoice_id: int) -> bool:
        async def action() -> bool:
            await self._invoices.delete(invoice_id)
            self._remove(invoice_id)
            return True

        return bool(await self._run(action, "Facture supprimée avec succès"))

    async def download_pdf(self, invoice_id: int) -> Optional[bytes]:
        return await self._run(lambda: self._invoices.download_pdf(invoice_id))
