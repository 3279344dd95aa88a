"""
Agencies module data models.

The backend describes an agency through several DTOs (the create/update
dashboard DTO, the details DTO, nested references inside vehicles and
employees). They all map onto the canonical Agency here.
"""

from typing import Optional
from pydantic import Field

from logistics_console.modules.auth.models import RoleEntity
from logistics_console.shared.models import PhoneNumber, StrId, WireModel


class AgencyRef(WireModel):
    """An agency as nested inside a vehicle or employee."""

    id: Optional[StrId] = Field(default=None, alias="id_agence")
    name: Optional[str] = Field(default=None, alias="nomAgence")
    address: Optional[str] = Field(default=None, alias="adresse_agence")


class AgencyEmployee(WireModel):
    """An employee as listed in an agency's details."""

    cin: StrId = Field(..., alias="empCin")
    name: str = Field(default="", alias="nom_emp")
    surname: str = Field(default="", alias="prenom_emp")
    phone: Optional[PhoneNumber] = Field(default=None, alias="emp_phone")
    address: Optional[str] = Field(default=None, alias="emp_adresse")
    role: Optional[RoleEntity] = None


class AgencyVehicle(WireModel):
    """A vehicle as listed in an agency's details."""

    immatriculation: StrId
    type: str = ""
    capacity: float = Field(default=0, alias="capacite")


class AgencyDetails(WireModel):
    """GET /agence/details/{key}: the agency with its employees and vehicles."""

    id: Optional[StrId] = Field(default=None)
    name: str = Field(..., alias="nomAgence")
    employees: list[AgencyEmployee] = Field(default_factory=list, alias="employes")
    vehicles: list[AgencyVehicle] = Field(default_factory=list, alias="vehicules")

    @property
    def has_dependents(self) -> bool:
        return bool(self.employees or self.vehicles)


class AgencyStats(WireModel):
    """Dashboard DTO returned by create, update and stats endpoints."""

    id: StrId
    name: str = Field(..., alias="nom")
    address: str = Field(default="", alias="adresse")
    employee_count: int = Field(default=0, alias="nombreEmployes")
    vehicle_count: int = Field(default=0, alias="nombreVehicules")


class Agency(WireModel):
    """
    Canonical client-side agency.

    `id` is the key every agency endpoint is called with: the agency's
    address, which is also what the details endpoint is addressed by.
    Placeholders are the exception and carry a position-based id.
    An agency with employees or vehicles must not be deleted.
    """

    id: StrId = Field(..., alias="id_agence")
    record_id: Optional[StrId] = Field(
        default=None,
        description="Backend row identifier, when the backend reports one",
    )
    name: str = Field(..., alias="nomAgence")
    address: str = Field(..., alias="adresse_agence")
    employees: list[AgencyEmployee] = Field(default_factory=list, alias="employes")
    vehicles: list[AgencyVehicle] = Field(default_factory=list, alias="vehicules")
    is_placeholder: bool = Field(
        default=False,
        description="True when details could not be fetched during listing",
    )

    @property
    def has_dependents(self) -> bool:
        return bool(self.employees or self.vehicles)


class AgencyPayload(WireModel):
    """Body of agency create and update requests."""

    name: str = Field(..., min_length=1, alias="nomAgence")
    address: str = Field(..., min_length=1, alias="adresse_agence")
