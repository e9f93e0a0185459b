"""
Security utilities for validating Supabase-issued access tokens.
Tokens are verified locally with the project JWT secret when one is configured.
"""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import BaseModel

from ..config.settings import get_settings
from .exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class TokenData(BaseModel):
    """Token payload data structure"""
    user_id: str
    email: Optional[str] = None
    role: Optional[str] = None
    expires_at: Optional[datetime] = None


class SecurityManager:
    """
    Verifies bearer tokens issued by Supabase Auth.

    Supabase signs access tokens with the project's JWT secret (HS256) and
    sets ``aud`` to ``authenticated`` for signed-in users.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        audience: Optional[str] = None
    ):
        settings = get_settings()
        self.secret_key = secret_key if secret_key is not None else settings.SUPABASE_JWT_SECRET
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.audience = audience or settings.JWT_AUDIENCE

    @property
    def can_verify_locally(self) -> bool:
        return bool(self.secret_key)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode an access token.

        Args:
            token: Raw bearer token

        Returns:
            dict: Decoded token payload

        Raises:
            AuthenticationError: If the token is invalid, expired or has no subject
        """
        if not self.can_verify_locally:
            raise AuthenticationError("Local token verification is not configured")

        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                audience=self.audience
            )
        except ExpiredSignatureError:
            logger.warning("Token has expired")
            raise AuthenticationError("Token expired")
        except JWTError as e:
            logger.warning(f"JWT validation failed: {e}")
            raise AuthenticationError("Could not validate credentials")

        if not payload.get("sub"):
            logger.warning("Token missing subject (user_id)")
            raise AuthenticationError("Could not validate credentials")

        logger.debug(f"Token verified successfully for user: {payload['sub']}")
        return payload

    def token_data(self, payload: Dict[str, Any]) -> TokenData:
        exp = payload.get("exp")
        return TokenData(
            user_id=str(payload["sub"]),
            email=payload.get("email"),
            role=payload.get("role"),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc) if exp else None,
        )


@lru_cache()
def get_security_manager() -> SecurityManager:
    """
    Get cached security manager instance.

    Returns:
        SecurityManager: Singleton security manager
    """
    return SecurityManager()
