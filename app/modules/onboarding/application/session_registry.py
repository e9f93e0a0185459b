# 📄 File: app/modules/onboarding/application/session_registry.py
# 🧭 Purpose (Layman Explanation):
# Keeps each owner's half-finished onboarding on the server so they can continue where they
# left off, makes sure nobody can peek at someone else's, and tidies up sessions nobody has
# touched for a while (throwing away their picked photos).
#
# 🧪 Purpose (Technical Summary):
# In-process registry of OnboardingSession objects keyed by id and owner. Owner-scoped
# lookups, TTL expiry with staged-file release, and discard after completion. Accessed only
# from the event loop thread, so no locking.
#
# 🔗 Dependencies:
# datetime, typing, onboarding domain models, app.shared.config.settings
#
# 🔄 Connected Modules / Calls From:
# Onboarding API endpoints (via get_session_registry), application lifespan

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Callable, Dict, List, Optional

from app.modules.onboarding.domain.models.onboarding_session import OnboardingSession
from app.modules.onboarding.domain.models.onboarding_state import OnboardingWizard
from app.modules.user_management.domain.models.profile import Profile
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import AuthorizationError, NotFoundError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OnboardingSessionRegistry:
    """Owner-scoped store of live onboarding sessions."""

    def __init__(
        self,
        ttl: Optional[timedelta] = None,
        clock: Callable[[], datetime] = _utcnow
    ):
        if ttl is None:
            ttl = timedelta(minutes=get_settings().ONBOARDING_SESSION_TTL_MINUTES)
        self.ttl = ttl
        self.clock = clock
        self._sessions: Dict[str, OnboardingSession] = {}
        self._by_owner: Dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def start(self, owner_id: str, profile: Optional[Profile] = None) -> OnboardingSession:
        """
        Return the owner's live session, or create one pre-filled from ``profile``.
        """
        self.purge_expired()

        existing_id = self._by_owner.get(owner_id)
        if existing_id is not None:
            session = self._sessions[existing_id]
            session.touch(self.clock())
            return session

        now = self.clock()
        session = OnboardingSession(
            owner_id=owner_id,
            wizard=OnboardingWizard.from_profile(profile),
            created_at=now,
            last_seen_at=now,
        )
        self._sessions[session.id] = session
        self._by_owner[owner_id] = session.id

        logger.info(f"Started onboarding session {session.id} for {owner_id}")
        return session

    def get(self, session_id: str, owner_id: str) -> OnboardingSession:
        """
        Raises:
            NotFoundError: If the session does not exist or has expired
            AuthorizationError: If the session belongs to another owner
        """
        session = self._sessions.get(session_id)
        if session is not None and session.is_expired(self.ttl, self.clock()):
            self._drop(session, reason="expired")
            session = None

        if session is None:
            raise NotFoundError(
                "Onboarding session not found",
                resource_type="onboarding_session",
                resource_id=session_id
            )

        if session.owner_id != owner_id:
            logger.warning(f"User {owner_id} tried to access onboarding session {session_id}")
            raise AuthorizationError(
                "Access denied",
                resource_type="onboarding_session",
                resource_id=session_id,
                user_id=owner_id
            )

        session.touch(self.clock())
        return session

    def find_for_owner(self, owner_id: str) -> Optional[OnboardingSession]:
        session_id = self._by_owner.get(owner_id)
        if session_id is None:
            return None
        try:
            return self.get(session_id, owner_id)
        except NotFoundError:
            return None

    def discard(self, session_id: str) -> None:
        session = self._sessions.get(session_id)
        if session is not None:
            self._drop(session, reason="discarded")

    def purge_expired(self) -> List[str]:
        """Drop every expired session and release its staged files."""
        now = self.clock()
        expired = [s for s in self._sessions.values() if s.is_expired(self.ttl, now)]
        for session in expired:
            self._drop(session, reason="expired")
        return [session.id for session in expired]

    def clear(self) -> None:
        for session in list(self._sessions.values()):
            self._drop(session, reason="shutdown")

    def _drop(self, session: OnboardingSession, reason: str) -> None:
        session.discard()
        self._sessions.pop(session.id, None)
        if self._by_owner.get(session.owner_id) == session.id:
            del self._by_owner[session.owner_id]
        logger.debug(f"Dropped onboarding session {session.id} ({reason})")


@lru_cache()
def get_session_registry() -> OnboardingSessionRegistry:
    """Process-wide registry; FastAPI dependency."""
    return OnboardingSessionRegistry()
