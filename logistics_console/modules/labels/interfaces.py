"""
Labels module interface.
"""

from typing import Protocol, runtime_checkable

from .models import Label


@runtime_checkable
class ILabelService(Protocol):
    """Interface for label generation and download."""

    async def generate(self, courier_id: int) -> Label:
        ...

    async def get_by_id(self, label_id: int) -> Label:
        ...

    async def get_by_tracking_code(self, tracking_code: str) -> Label:
        ...

    async def download_pdf(self, label_id: int) -> bytes:
        ...

    async def download_pdf_by_tracking_code(self, tracking_code: str) -> bytes:
        ...
