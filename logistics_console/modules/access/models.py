"""
Access control data models.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from logistics_console.modules.auth.models import Role


class GuardDecision(BaseModel):
    """Outcome of guarding a route: render it, or redirect elsewhere."""

    model_config = ConfigDict(frozen=True)

    allowed: bool = Field(..., description="Whether the protected content renders")
    redirect_to: Optional[str] = Field(None, description="Target path when not allowed")

    @classmethod
    def render(cls) -> "GuardDecision":
        return cls(allowed=True)

    @classmethod
    def redirect(cls, path: str) -> "GuardDecision":
        return cls(allowed=False, redirect_to=path)


class RouteRule(BaseModel):
    """A protected route prefix and the role it requires."""

    model_config = ConfigDict(frozen=True)

    prefix: str
    required_role: Role
