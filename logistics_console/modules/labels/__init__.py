"""
Labels module.

Public API:
- ILabelService: Interface for label operations
- LabelService: Implementation over the /courriers/etiquette endpoints
- Label: Model
"""

from .interfaces import ILabelService
from .models import Label
from .service import LabelService

__all__ = [
    "ILabelService",
    "LabelService",
    "Label",
]
