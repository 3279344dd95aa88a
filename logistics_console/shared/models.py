"""
Shared model building blocks used across modules.

These are shared infrastructure, not business entities. Entity models
stay in their respective module directories.
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _to_str_id(value: Any) -> Any:
    # Numeric identifiers from older backend versions are stringified
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(int(value))
    return value


def _to_optional_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


StrId = Annotated[str, BeforeValidator(_to_str_id)]
"""Canonical identifier for agencies, vehicles and employees."""

PhoneNumber = Annotated[str, BeforeValidator(_to_optional_str)]
"""Phone numbers arrive as strings or numbers depending on the entity."""


class WireModel(BaseModel):
    """
    Base for models mapped onto backend DTOs.

    Fields carry the backend's (French) names as aliases; both names are
    accepted on input and model_dump(by_alias=True) produces wire names.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict with wire names, omitting unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
