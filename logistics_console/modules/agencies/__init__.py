"""
Agencies module.

Public API:
- IAgencyService: Interface for agency operations
- AgencyService: Implementation over the /agence endpoints
- Agency, AgencyPayload, AgencyDetails, AgencyStats, AgencyRef: Models
- HasDependentsError: Raised when deleting an agency that is still in use
"""

from .interfaces import IAgencyService
from .models import (
    Agency,
    AgencyRef,
    AgencyDetails,
    AgencyEmployee,
    AgencyVehicle,
    AgencyPayload,
    AgencyStats,
)
from .exceptions import HasDependentsError
from .service import AgencyService, placeholder_agency

__all__ = [
    "IAgencyService",
    "AgencyService",
    "placeholder_agency",
    "Agency",
    "AgencyRef",
    "AgencyDetails",
    "AgencyEmployee",
    "AgencyVehicle",
    "AgencyPayload",
    "AgencyStats",
    "HasDependentsError",
]
