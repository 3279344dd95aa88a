"""
Label service implementation.

Only the backend boundary: rendering happens server-side and PDFs come
back as raw bytes.
"""

import logging

from logistics_console.shared.service import BaseApiService

from .interfaces import ILabelService
from .models import Label

logger = logging.getLogger(__name__)

BASE_ENDPOINT = "/courriers/etiquette"


class LabelService(BaseApiService[Label], ILabelService):

    async def generate(self, courier_id: int) -> Label:
        label = await self.send_one("POST", Label, f"{BASE_ENDPOINT}/generate/{courier_id}")
        logger.info(f"Generated label {label.tracking_code} for courier {courier_id}")
        return label

    async def get_by_id(self, label_id: int) -> Label:
        return await self.fetch_one(Label, f"{BASE_ENDPOINT}/{label_id}")

    async def get_by_tracking_code(self, tracking_code: str) -> Label:
        return await self.fetch_one(Label, f"{BASE_ENDPOINT}/tracking/{tracking_code}")

    async def download_pdf(self, label_id: int) -> bytes:
        return await self._api.get_bytes(f"{BASE_ENDPOINT}/{label_id}/pdf")

    async def download_pdf_by_tracking_code(self, tracking_code: str) -> bytes:
        return await self._api.get_bytes(f"{BASE_ENDPOINT}/tracking/{tracking_code}/pdf")
