"""
Vehicles module data models.
"""

from typing import Optional
from pydantic import Field

from logistics_console.modules.agencies.models import AgencyRef
from logistics_console.shared.models import PhoneNumber, StrId, WireModel


class TransporterRef(WireModel):
    """The transporter a vehicle is assigned to."""

    cin: StrId = Field(..., alias="trs_Cin")
    name: str = Field(default="", alias="nom_trs")
    surname: str = Field(default="", alias="prenom_trs")
    phone: Optional[PhoneNumber] = Field(default=None, alias="trs_phone")


class Vehicle(WireModel):
    """
    A vehicle, keyed by its immatriculation.

    An assigned vehicle must not be deleted nor offered in assignment
    pickers.
    """

    immatriculation: StrId
    type: str = ""
    capacity: float = Field(..., gt=0, alias="capacite")
    agency: Optional[AgencyRef] = Field(default=None, alias="agence")
    assigned_transporter: Optional[TransporterRef] = Field(
        default=None,
        alias="transporteurVehicule",
    )

    @property
    def is_available(self) -> bool:
        return self.assigned_transporter is None


class VehiclePayload(WireModel):
    """Body of vehicle create and update requests."""

    immatriculation: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1)
    capacity: float = Field(..., gt=0, alias="capacite")
    agency_id: Optional[StrId] = Field(default=None, alias="idAgence")
