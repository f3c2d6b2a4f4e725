from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..config.settings import AdminSettings
from ..domain import AccessRole

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AuthService:
    """Maps credentials to a role and keeps the issued session tokens.

    The role only decides which operations a caller may invoke; the event
    store itself has no notion of privilege.
    """

    settings: AdminSettings
    sessions: Dict[str, AccessRole] = field(default_factory=dict)

    def login(self, username: str, password: str) -> AccessRole:
        if self.settings.accepts(username, password):
            logger.info("Admin login accepted for %s", username)
            return AccessRole.ADMIN
        logger.info("Admin login rejected for %s; continuing as viewer", username)
        return AccessRole.VIEWER

    def open_session(self, username: str, password: str) -> tuple[Optional[str], AccessRole]:
        """Issue a token for admin logins only; a viewer receives None."""
        role = self.login(username, password)
        if role is not AccessRole.ADMIN:
            return None, role
        token = secrets.token_urlsafe(24)
        self.sessions[token] = role
        return token, role

    def role_for(self, token: Optional[str]) -> AccessRole:
        if not token:
            return AccessRole.VIEWER
        return self.sessions.get(token, AccessRole.VIEWER)

    def close_session(self, token: Optional[str]) -> bool:
        if not token:
            return False
        closed = self.sessions.pop(token, None) is not None
        if closed:
            logger.info("Closed admin session")
        return closed
