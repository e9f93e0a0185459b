"""
Common FastAPI dependencies for the CigarMap API.
Provides database sessions, the per-request identity gateway and the authenticated caller.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.modules.user_management.domain.services.identity_gateway import AuthUser, IdentityGateway
from app.modules.user_management.infrastructure.external.supabase_auth import SupabaseIdentityGateway
from app.shared.infrastructure.database.session import get_db_session

from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)

# Security scheme for OpenAPI documentation; missing tokens are handled per endpoint
security = HTTPBearer(auto_error=False)

# Database session dependency under the name the routers use
get_db = get_db_session


class CurrentUser:
    """The authenticated caller, enriched with profile roles where loaded."""

    def __init__(
        self,
        user_id: str,
        email: Optional[str] = None,
        roles: Optional[List[str]] = None,
        token_payload: Optional[Dict[str, Any]] = None
    ):
        self.user_id = user_id
        self.email = email
        self.roles = roles or ["owner"]
        self.token_payload = token_payload or {}

    def has_role(self, role: str) -> bool:
        """Check if user has specific role."""
        return role in self.roles

    def is_admin(self) -> bool:
        """Check if user has admin privileges."""
        return self.has_role("admin")

    def to_dict(self) -> Dict[str, Any]:
        """Convert user info to dictionary."""
        return {
            "user_id": self.user_id,
            "email": self.email,
            "roles": self.roles
        }

    @classmethod
    def from_auth_user(cls, auth_user: AuthUser) -> "CurrentUser":
        return cls(user_id=auth_user.id, email=auth_user.email, token_payload=dict(auth_user.claims))


async def get_identity_gateway(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> IdentityGateway:
    """
    Identity gateway bound to the request's bearer token (if any).
    Tests override this dependency with an in-memory gateway.
    """
    token = credentials.credentials if credentials else None
    return SupabaseIdentityGateway(access_token=token)


async def get_optional_current_user(
    gateway: IdentityGateway = Depends(get_identity_gateway)
) -> Optional[CurrentUser]:
    auth_user = await gateway.current_user()
    return CurrentUser.from_auth_user(auth_user) if auth_user else None


async def get_current_user(
    current_user: Optional[CurrentUser] = Depends(get_optional_current_user)
) -> CurrentUser:
    """
    Get the authenticated caller.

    Raises:
        AuthenticationError: If the request carries no valid token
    """
    if current_user is None:
        logger.debug("Rejected anonymous request to authenticated endpoint")
        raise AuthenticationError("User not authenticated")
    return current_user
