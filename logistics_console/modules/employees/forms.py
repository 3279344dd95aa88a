"""
Role-tagged employee forms.

The fields an employee form carries depend on the selected role: an
operator gets a login account (email and password), a transporter gets
an optional vehicle, everyone else only the base fields. Each shape is
its own model, discriminated by `kind`, so a form can never carry the
fields of another role.
"""

from typing import Annotated, Any, ClassVar, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter

from logistics_console.modules.auth.models import Role, RoleEntity


BASE_FIELDS = ("cin", "name", "surname", "phone", "address", "agency_id", "role_id")
OPERATOR_FIELDS = BASE_FIELDS + ("email", "password")
TRANSPORTER_FIELDS = BASE_FIELDS + ("vehicle_immatriculation",)


class _EmployeeFormBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    cin: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    surname: str = Field(..., min_length=1)
    phone: str = ""
    address: str = ""
    agency_id: str = Field(..., min_length=1)
    role_id: int

    visible_fields: ClassVar[tuple[str, ...]] = BASE_FIELDS

    def employee_payload(self) -> dict[str, Any]:
        """Employee body as the /employe endpoints expect it."""
        agency_id: Any = int(self.agency_id) if self.agency_id.isdigit() else self.agency_id
        return {
            "empCin": self.cin,
            "nom_emp": self.name,
            "prenom_emp": self.surname,
            "emp_phone": self.phone,
            "emp_adresse": self.address,
            "id_agence": agency_id,
            "id_role": self.role_id,
        }


class StaffForm(_EmployeeFormBase):
    """Employee without a login account nor a vehicle."""

    kind: Literal["STAFF"] = "STAFF"


class OperatorForm(_EmployeeFormBase):
    """Operator: the employee is created together with a login account."""

    kind: Literal["OPERATEUR"] = "OPERATEUR"
    email: EmailStr
    password: str = Field(..., min_length=6, repr=False)

    visible_fields: ClassVar[tuple[str, ...]] = OPERATOR_FIELDS

    def user_payload(self) -> dict[str, Any]:
        return {
            "email": self.email,
            "mot_passe": self.password,
            "id_role": self.role_id,
        }


class TransporterForm(_EmployeeFormBase):
    """Transporter: optionally assigned to an available vehicle."""

    kind: Literal["TRANSPORTEUR"] = "TRANSPORTEUR"
    vehicle_immatriculation: Optional[str] = None

    visible_fields: ClassVar[tuple[str, ...]] = TRANSPORTER_FIELDS

    def employee_payload(self) -> dict[str, Any]:
        payload = super().employee_payload()
        if self.vehicle_immatriculation:
            payload["immatriculation"] = self.vehicle_immatriculation
        return payload


EmployeeForm = Annotated[
    Union[StaffForm, OperatorForm, TransporterForm],
    Field(discriminator="kind"),
]

employee_form_adapter: TypeAdapter[EmployeeForm] = TypeAdapter(EmployeeForm)


def form_class_for(role: Optional[Role]) -> type[_EmployeeFormBase]:
    """The form variant matching a role."""
    if role is Role.OPERATEUR:
        return OperatorForm
    if role is Role.TRANSPORTEUR:
        return TransporterForm
    return StaffForm


def visible_fields_for(role: Optional[Role]) -> tuple[str, ...]:
    return form_class_for(role).visible_fields


def build_form(role: RoleEntity, **values: Any) -> EmployeeForm:
    """
    Build the form variant for `role` from raw field values.

    Values that belong to another role's variant are dropped.

    Raises:
        pydantic.ValidationError: If a required field is missing or invalid
    """
    form_class = form_class_for(role.role)
    allowed = set(form_class.visible_fields)
    data = {key: value for key, value in values.items() if key in allowed}
    data["role_id"] = role.id
    return form_class.model_validate(data)
