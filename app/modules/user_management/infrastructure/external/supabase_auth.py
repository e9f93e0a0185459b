# 📄 File: app/modules/user_management/infrastructure/external/supabase_auth.py
# 🧭 Purpose (Layman Explanation):
# Asks Supabase (our sign-in provider) who is behind a request, either by checking the token's
# signature ourselves or by asking Supabase directly, and relays sign-in/sign-out events.
#
# 🧪 Purpose (Technical Summary):
# IdentityGateway implementation bound to one bearer token. Verifies locally with python-jose
# when SUPABASE_JWT_SECRET is configured, otherwise calls ``auth.get_user(token)`` on the
# Supabase client in a worker thread. Auth-change subscriptions delegate to
# ``auth.on_auth_state_change``.
#
# 🔗 Dependencies:
# - supabase-py (auth client), python-jose via app.shared.core.security
# - IdentityGateway / AuthUser domain interface
#
# 🔄 Connected Modules / Calls From:
# - app.shared.core.dependencies (per-request gateway)
# - Onboarding submission service (current user resolution)

import asyncio
import logging
from typing import Any, Optional

from app.modules.user_management.domain.services.identity_gateway import (
    AuthChangeCallback,
    AuthUser,
    IdentityGateway,
    Unsubscribe,
)
from app.shared.config.supabase import SupabaseManager, get_supabase_manager
from app.shared.core.exceptions import AuthenticationError
from app.shared.core.security import SecurityManager, get_security_manager

logger = logging.getLogger(__name__)


class SupabaseIdentityGateway(IdentityGateway):
    """
    Identity gateway for a single request's bearer token.

    An absent or invalid token yields ``None`` from ``current_user``; deciding
    whether anonymity is acceptable is left to the caller.
    """

    def __init__(
        self,
        access_token: Optional[str],
        manager: Optional[SupabaseManager] = None,
        security: Optional[SecurityManager] = None
    ):
        self.access_token = access_token
        self.manager = manager or get_supabase_manager()
        self.security = security or get_security_manager()
        self._resolved = False
        self._user: Optional[AuthUser] = None

    async def current_user(self) -> Optional[AuthUser]:
        if self._resolved:
            return self._user

        self._user = await self._resolve()
        self._resolved = True
        return self._user

    def on_auth_change(self, callback: AuthChangeCallback) -> Unsubscribe:
        def relay(event: Any, session: Any) -> None:
            user = getattr(session, "user", None) if session is not None else None
            callback(
                str(getattr(event, "value", event)),
                AuthUser(id=str(user.id), email=getattr(user, "email", None)) if user else None
            )

        subscription = self.manager.get_auth_client().on_auth_state_change(relay)
        return subscription.unsubscribe

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    async def _resolve(self) -> Optional[AuthUser]:
        if not self.access_token:
            return None

        if self.security.can_verify_locally:
            try:
                payload = self.security.verify_token(self.access_token)
            except AuthenticationError as e:
                logger.info(f"Rejected bearer token: {e.message}")
                return None
            token = self.security.token_data(payload)
            return AuthUser(id=token.user_id, email=token.email, claims=payload)

        return await self._fetch_remote_user()

    async def _fetch_remote_user(self) -> Optional[AuthUser]:
        auth = self.manager.get_auth_client()
        try:
            response = await asyncio.to_thread(auth.get_user, self.access_token)
        except Exception as e:
            # supabase-py raises AuthApiError for bad tokens and transport errors otherwise
            logger.warning(f"Supabase get_user failed: {e}")
            return None

        user = getattr(response, "user", None)
        if user is None:
            return None
        return AuthUser(id=str(user.id), email=getattr(user, "email", None))
