"""
Access control module.

Public API:
- AccessControl: role checks, redirect targets and the route guard
- GuardDecision: render-or-redirect outcome
"""

from .models import GuardDecision, RouteRule
from .service import AccessControl

__all__ = [
    "AccessControl",
    "GuardDecision",
    "RouteRule",
]
