"""
Role-based access control.

Derives capabilities and redirect targets from the session and gates
the /admin and /operator route subtrees. Nothing here grants access by
default: a missing session, a missing role or an unknown role all lead
back to the login page.
"""

import logging
from typing import Callable, Optional

from logistics_console.modules.auth.models import Role, Session
from logistics_console.shared.config import Settings, get_settings

from .models import GuardDecision, RouteRule

logger = logging.getLogger(__name__)


class AccessControl:
    """Role checks and route resolution for the console's routing surface."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()
        self._rules = [
            RouteRule(prefix=self._settings.admin_path, required_role=Role.ADMIN),
            RouteRule(prefix=self._settings.operator_path, required_role=Role.OPERATEUR),
        ]
        self._home_by_role = {
            Role.ADMIN: self._settings.admin_path,
            Role.OPERATEUR: self._settings.operator_path,
        }

    def role_of(self, session: Optional[Session]) -> Optional[Role]:
        """The session's role, or None when unauthenticated or unrecognized."""
        if session is None:
            return None
        return session.role

    def has_role(self, session: Optional[Session], required: Role) -> bool:
        """False whenever there is no session."""
        return self.role_of(session) == required

    def redirect_target_for(self, session: Optional[Session]) -> str:
        """Where a user should land: their console, or the login page."""
        if session is None:
            return self._settings.login_path

        role_name = session.profile.role.name
        if not role_name:
            logger.error("Session has no role, redirecting to login")
            return self._settings.login_path

        role = session.role
        target = self._home_by_role.get(role) if role is not None else None
        if target is None:
            logger.error(f"Unrecognized role: {role_name}")
            return self._settings.login_path
        return target

    def guard(
        self,
        is_authenticated: bool,
        required_role_check: Callable[[], bool],
        fallback_path: str,
    ) -> GuardDecision:
        """
        Decide whether protected content renders.

        An authenticated user with the wrong role goes to the neutral
        dashboard path, which resolves to their own console, rather than
        to the login page.
        """
        if not is_authenticated:
            return GuardDecision.redirect(fallback_path)
        if not required_role_check():
            return GuardDecision.redirect(self._settings.dashboard_path)
        return GuardDecision.render()

    def resolve_route(self, session: Optional[Session], path: str) -> GuardDecision:
        """Apply the routing table to a requested path."""
        if path == self._settings.login_path:
            return GuardDecision.render()
        if path in ("", "/", self._settings.dashboard_path):
            return GuardDecision.redirect(self.redirect_target_for(session))

        for rule in self._rules:
            if path == rule.prefix or path.startswith(rule.prefix + "/"):
                return self.guard(
                    is_authenticated=session is not None,
                    required_role_check=lambda: self.has_role(session, rule.required_role),
                    fallback_path=self._settings.login_path,
                )

        logger.debug(f"No route for {path}")
        return GuardDecision.redirect(self.redirect_target_for(session))
