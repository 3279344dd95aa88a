"""
Employees module data models.
"""

from typing import Optional
from pydantic import Field

from logistics_console.modules.agencies.models import AgencyRef
from logistics_console.modules.auth.models import Role, RoleEntity
from logistics_console.modules.vehicles.models import Vehicle
from logistics_console.shared.models import PhoneNumber, StrId, WireModel


class UserAccount(WireModel):
    """The login account of an operator."""

    email: str
    role: Optional[RoleEntity] = None


class TransporterProfile(WireModel):
    """Transporter side of an employee, carrying the assigned vehicle."""

    cin: Optional[StrId] = Field(default=None, alias="trs_Cin")
    vehicle: Optional[Vehicle] = Field(default=None, alias="vehiculeTransporteur")


class Employee(WireModel):
    """
    An employee, keyed by CIN.

    Operators carry a user account; transporters carry a transporter
    profile with their assigned vehicle.
    """

    cin: StrId = Field(..., alias="empCin")
    name: str = Field(default="", alias="nom_emp")
    surname: str = Field(default="", alias="prenom_emp")
    phone: Optional[PhoneNumber] = Field(default=None, alias="emp_phone")
    address: Optional[str] = Field(default=None, alias="emp_adresse")
    agency: Optional[AgencyRef] = Field(default=None, alias="agence")
    role: Optional[RoleEntity] = None
    user_account: Optional[UserAccount] = Field(default=None, alias="utilisateur")
    transporter_profile: Optional[TransporterProfile] = Field(
        default=None,
        alias="transporteur",
    )

    @property
    def role_name(self) -> Optional[Role]:
        return self.role.role if self.role else None

    @property
    def full_name(self) -> str:
        return f"{self.surname} {self.name}".strip()

    @property
    def assigned_vehicle(self) -> Optional[Vehicle]:
        if self.transporter_profile is None:
            return None
        return self.transporter_profile.vehicle
