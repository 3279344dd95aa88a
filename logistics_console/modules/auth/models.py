"""
Authentication module data models.

These models define the session and user structures owned by the
session manager and exposed to the other modules.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Role(str, Enum):
    """Roles known to the console."""

    ADMIN = "ADMIN"
    OPERATEUR = "OPERATEUR"
    TRANSPORTEUR = "TRANSPORTEUR"


def parse_role(name: Optional[str]) -> Optional[Role]:
    """Map a role name onto Role, or None when it is missing or unknown."""
    if not name:
        return None
    try:
        return Role(name)
    except ValueError:
        return None


class RoleEntity(BaseModel):
    """A role row as the backend stores it ({id_role, nom})."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: int = Field(..., alias="id_role")
    # Kept as str so an unrecognized role survives parsing and can be refused later
    name: str = Field(..., alias="nom")

    @property
    def role(self) -> Optional[Role]:
        return parse_role(self.name)


class EmployeeProfile(BaseModel):
    """The employee record attached to a user account."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    cin: str = Field(..., alias="empCin")
    name: str = Field(default="", alias="nom_emp")
    surname: str = Field(default="", alias="prenom_emp")
    phone: Optional[str] = Field(default=None, alias="emp_phone")
    address: Optional[str] = Field(default=None, alias="emp_adresse")

    @property
    def full_name(self) -> str:
        return f"{self.surname} {self.name}".strip()


class User(BaseModel):
    """
    Authenticated user profile.

    Immutable snapshot for the lifetime of a session. The password hash the
    backend echoes back is not part of the model and is dropped on parsing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    email: EmailStr
    role: RoleEntity
    employee_profile: Optional[EmployeeProfile] = Field(default=None, alias="employe")


class TokenClaims(BaseModel):
    """Claims read from the backend's JWT."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    subject_email: str = Field(..., description="sub claim (user email)")
    role: Optional[str] = Field(default=None, description="role claim")
    expiry: int = Field(..., description="exp claim (epoch seconds)")

    def is_expired(self, now: float) -> bool:
        return self.expiry <= now

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.expiry, tz=timezone.utc)


class SessionState(str, Enum):
    """Session manager states."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATING = "authenticating"
    AUTHENTICATED = "authenticated"


class Session(BaseModel):
    """A live session: the raw token, its claims and the fetched profile."""

    model_config = ConfigDict(frozen=True)

    raw_token: str
    claims: TokenClaims
    profile: User

    def is_valid(self, now: float) -> bool:
        return not self.claims.is_expired(now)

    @property
    def role(self) -> Optional[Role]:
        return self.profile.role.role
