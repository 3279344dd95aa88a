"""
Deliveries module data models.
"""

from datetime import date
from typing import Optional
from pydantic import Field

from logistics_console.modules.courriers.models import Courier
from logistics_console.shared.models import StrId, WireModel


class Delivery(WireModel):
    """
    A courier handed to a transporter and a vehicle.

    While the delivery exists its courier is in delivery; removing the
    delivery puts the courier back to deposited.
    """

    id: int
    courier_id: int = Field(..., alias="courrierId")
    ship_date: Optional[date] = Field(default=None, alias="dateEnvoi")
    vehicle_id: StrId = Field(..., alias="vehiculeId")
    transporter_id: StrId = Field(..., alias="transporteurId")
    courier: Optional[Courier] = Field(default=None, alias="courrier")


class DeliveryPayload(WireModel):
    """Body of delivery create and update requests."""

    courier_id: int = Field(..., alias="courrierId")
    ship_date: date = Field(..., alias="dateEnvoi")
    vehicle_id: str = Field(..., min_length=1, alias="vehiculeId")
    transporter_id: str = Field(..., min_length=1, alias="transporteurId")
