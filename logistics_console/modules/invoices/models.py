"""
Invoices module data models.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import Field

from logistics_console.modules.courriers.models import Courier
from logistics_console.shared.models import WireModel


class PaymentStatus(str, Enum):
    PAID = "PAYE"
    UNPAID = "NON_PAYE"


class Invoice(WireModel):
    """An invoice for a delivered courier; only its payment status changes."""

    id: int
    courier_id: int = Field(..., alias="courrierId")
    amount: Decimal = Field(default=Decimal("0"), alias="montant")
    issue_date: Optional[datetime] = Field(default=None, alias="dateEmission")
    payment_status: PaymentStatus = Field(default=PaymentStatus.UNPAID, alias="statutPaiement")
    courier: Optional[Courier] = Field(default=None, alias="courrier")

    @property
    def is_paid(self) -> bool:
        return self.payment_status is PaymentStatus.PAID


class InvoicePayload(WireModel):
    """Body of the invoice create request; the amount is computed server-side."""

    courier_id: int = Field(..., alias="courrierId")
    payment_status: PaymentStatus = Field(default=PaymentStatus.UNPAID, alias="statutPaiement")


class InvoiceStatusUpdate(WireModel):
    """The only mutable part of an invoice."""

    payment_status: PaymentStatus = Field(..., alias="statutPaiement")
