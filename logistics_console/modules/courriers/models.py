"""
Courriers module data models.

A courier moves forward through a fixed lifecycle:
deposited -> in delivery -> delivered.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional
from pydantic import Field

from logistics_console.shared.models import PhoneNumber, StrId, WireModel


class CourierStatus(str, Enum):
    """Courier lifecycle states, valued with the backend's wire names."""

    DEPOSITED = "depose"
    IN_DELIVERY = "en_cours_de_livraison"
    DELIVERED = "livre"


LIFECYCLE: tuple[CourierStatus, ...] = (
    CourierStatus.DEPOSITED,
    CourierStatus.IN_DELIVERY,
    CourierStatus.DELIVERED,
)


def next_status(status: CourierStatus) -> Optional[CourierStatus]:
    """The status following `status`, or None once delivered."""
    position = LIFECYCLE.index(status)
    if position + 1 < len(LIFECYCLE):
        return LIFECYCLE[position + 1]
    return None


STATUS_LABELS = {
    CourierStatus.DEPOSITED: "Déposé",
    CourierStatus.IN_DELIVERY: "En cours de livraison",
    CourierStatus.DELIVERED: "Livré",
}


class Client(WireModel):
    """The sender of a courier."""

    cin: StrId
    name: str = Field(default="", alias="nom_clt")
    surname: str = Field(default="", alias="prenom_clt")
    address: str = Field(default="", alias="clt_adress")
    phone: Optional[PhoneNumber] = Field(default=None, alias="phone_number")

    @property
    def full_name(self) -> str:
        return f"{self.surname} {self.name}".strip()


class Courier(WireModel):
    """A parcel, from deposit at the origin agency to delivery."""

    id: int
    ship_date: Optional[date] = Field(default=None, alias="dateEnvoie")
    weight: float = Field(..., gt=0, alias="poids")
    status: CourierStatus = Field(default=CourierStatus.DEPOSITED, alias="statut")
    price: Optional[Decimal] = Field(default=None, alias="prixTransmission")
    origin_agency: str = Field(default="", alias="agenceExped")
    destination_agency: str = Field(default="", alias="agenceDest")
    recipient_name: str = Field(default="", alias="nom_complet_dest")
    recipient_address: str = Field(default="", alias="adresse_dest")
    recipient_cin: str = Field(default="", alias="cin_dest")
    sender: Optional[Client] = Field(default=None, alias="client")


class CourierPayload(WireModel):
    """
    Body of courier create and update requests.

    The backend takes the sender's fields flattened next to the
    courier's own; the sender is created or reused by CIN.
    """

    sender_cin: str = Field(..., min_length=1, alias="cin")
    sender_name: str = Field(..., min_length=1, alias="nom_clt")
    sender_surname: str = Field(..., min_length=1, alias="prenom_clt")
    sender_address: str = Field(default="", alias="clt_adress")
    sender_phone: str = Field(default="", alias="phone_number")
    ship_date: Optional[date] = Field(default=None, alias="dateEnvoie")
    weight: float = Field(..., gt=0, alias="poids")
    recipient_cin: str = Field(..., min_length=1, alias="cin_dest")
    recipient_name: str = Field(..., min_length=1, alias="nom_complet_dest")
    recipient_address: str = Field(..., min_length=1, alias="adresse_dest")
    origin_agency: str = Field(..., min_length=1, alias="agenceExped")
    destination_agency: str = Field(..., min_length=1, alias="agenceDest")
    status: Optional[CourierStatus] = Field(default=None, alias="statut")
    price: Optional[float] = Field(default=None, alias="prixTransmission")
