# 📄 File: app/modules/user_management/domain/services/identity_gateway.py
# 🧭 Purpose (Layman Explanation):
# The doorway to the sign-in provider: "who is the current user?" and "tell me when they sign
# in or out". The rest of the app only talks to this doorway, never to the provider directly.
# 🧪 Purpose (Technical Summary):
# Abstract identity gateway consumed by the onboarding engine and the auth dependencies.
# The Supabase-backed implementation lives in infrastructure/external/supabase_auth.py;
# tests supply an in-memory fake.
# 🔗 Dependencies:
# abc, dataclasses, typing
# 🔄 Connected Modules / Calls From:
# shared.core.dependencies, onboarding submission service, Supabase implementation

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

AuthChangeCallback = Callable[[str, Optional["AuthUser"]], None]
Unsubscribe = Callable[[], None]


@dataclass(frozen=True)
class AuthUser:
    """An authenticated identity as reported by the provider."""
    id: str
    email: Optional[str] = None
    claims: Dict[str, Any] = field(default_factory=dict, compare=False)


class IdentityGateway(ABC):
    """Read-only view of the identity provider for one caller."""

    @abstractmethod
    async def current_user(self) -> Optional[AuthUser]:
        """The authenticated user, or None when the caller is anonymous or the token is invalid."""
        pass

    @abstractmethod
    def on_auth_change(self, callback: AuthChangeCallback) -> Unsubscribe:
        """
        Register ``callback(event, user)`` for sign-in/sign-out events.

        Returns:
            A function that removes the subscription
        """
        pass
