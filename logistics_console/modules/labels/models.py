"""
Labels module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import Field

from logistics_console.shared.models import WireModel


class Label(WireModel):
    """A shipping label; its tracking code identifies the courier publicly."""

    id: int
    courier_id: int = Field(..., alias="courrierId")
    tracking_code: str = Field(..., alias="codeTracking")
    created_at: Optional[datetime] = Field(default=None, alias="dateCreation")
