import os
from datetime import datetime, timezone
from io import BytesIO
from typing import Dict, List, Optional, Set
from uuid import uuid4

import pytest

# Set test environment variables before the settings are first read
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_ANON_KEY", "test-anon-key")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-with-enough-length")
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_FORMAT"] = "text"
os.environ["DEBUG"] = "false"

import httpx
from PIL import Image
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.modules.billing.infrastructure.database import models as billing_models  # noqa: F401
from app.modules.directory.domain.models.city import City
from app.modules.directory.domain.models.lounge import Lounge
from app.modules.directory.infrastructure.database import models as directory_models  # noqa: F401
from app.modules.directory.infrastructure.database.city_repository_impl import CityRepositoryImpl
from app.modules.directory.infrastructure.database.lounge_repository_impl import LoungeRepositoryImpl
from app.modules.user_management.domain.services.identity_gateway import AuthUser, IdentityGateway
from app.modules.user_management.infrastructure.database.models import ProfileModel
from app.shared.infrastructure.database.connection import Base
from app.shared.infrastructure.storage.supabase_storage import ObjectStore

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# =============================================================================
# FAKES
# =============================================================================

class FakeIdentityGateway(IdentityGateway):
    """Identity provider double; set ``user`` to sign someone in."""

    def __init__(self, user: Optional[AuthUser] = None):
        self.user = user
        self.callbacks = []

    async def current_user(self) -> Optional[AuthUser]:
        return self.user

    def sign_in(self, user_id: str, email: Optional[str] = None) -> AuthUser:
        self.user = AuthUser(id=user_id, email=email or f"{user_id[:8]}@example.com")
        for callback in list(self.callbacks):
            callback("SIGNED_IN", self.user)
        return self.user

    def sign_out(self) -> None:
        self.user = None
        for callback in list(self.callbacks):
            callback("SIGNED_OUT", None)

    def on_auth_change(self, callback):
        self.callbacks.append(callback)
        return lambda: self.callbacks.remove(callback)


class FakeObjectStore(ObjectStore):
    """Records uploads in memory; filenames in ``fail_for`` raise."""

    def __init__(self):
        self.uploads: List[Dict[str, str]] = []
        self.fail_for: Set[str] = set()

    async def upload(self, bucket: str, path: str, data: bytes, content_type: str) -> str:
        if any(path.endswith(name) for name in self.fail_for):
            raise RuntimeError(f"storage rejected {path}")
        self.uploads.append({"bucket": bucket, "path": path, "content_type": content_type})
        return f"https://storage.test/{bucket}/{path}"

    @property
    def paths(self) -> List[str]:
        return [upload["path"] for upload in self.uploads]


# =============================================================================
# HELPERS
# =============================================================================

def new_id() -> str:
    return str(uuid4())


def make_png(width: int = 4, height: int = 4, color=(120, 60, 20)) -> bytes:
    buffer = BytesIO()
    Image.new("RGB", (width, height), color).save(buffer, format="PNG")
    return buffer.getvalue()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================

@pytest.fixture
async def engine():
    """In-memory SQLite engine with every table created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def db_session(engine):
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def seed_profile(db_session):
    """Insert a profile row the way the sign-up trigger would."""

    async def _seed(
        profile_id: Optional[str] = None,
        full_name: Optional[str] = None,
        role: str = "owner",
        onboarding_completed: bool = False,
        avatar_url: Optional[str] = None,
        email: Optional[str] = None
    ) -> str:
        profile_id = profile_id or new_id()
        now = datetime(2026, 1, 1, tzinfo=timezone.utc)
        db_session.add(ProfileModel(
            id=profile_id,
            email=email or f"{profile_id[:8]}@example.com",
            full_name=full_name,
            role=role,
            onboarding_completed=onboarding_completed,
            avatar_url=avatar_url,
            created_at=now,
            updated_at=now,
        ))
        await db_session.commit()
        return profile_id

    return _seed


@pytest.fixture
def seed_city(db_session):
    async def _seed(name: str = "Miami", slug: Optional[str] = None, **kwargs) -> City:
        city = await CityRepositoryImpl(db_session).create(
            City(name=name, slug=slug or name.lower().replace(" ", "-"), **kwargs)
        )
        await db_session.commit()
        return city

    return _seed


@pytest.fixture
def seed_lounge(db_session):
    async def _seed(name: str = "Smoke House", **kwargs) -> Lounge:
        lounge = await LoungeRepositoryImpl(db_session).create(Lounge(name=name, **kwargs))
        await db_session.commit()
        return lounge

    return _seed


# =============================================================================
# FAKE FIXTURES
# =============================================================================

@pytest.fixture
def identity():
    return FakeIdentityGateway()


@pytest.fixture
def object_store():
    return FakeObjectStore()


@pytest.fixture
def registry():
    from app.modules.onboarding.application.session_registry import OnboardingSessionRegistry
    return OnboardingSessionRegistry()


@pytest.fixture
def png_bytes():
    return make_png()


# =============================================================================
# API FIXTURES
# =============================================================================

@pytest.fixture
def app(db_session, identity, object_store, registry):
    """Application with the database, identity provider and storage swapped for test doubles."""
    from app.main import create_application
    from app.modules.onboarding.presentation.dependencies import get_registry
    from app.shared.core.dependencies import get_identity_gateway
    from app.shared.infrastructure.database.session import get_db_session
    from app.shared.infrastructure.storage.supabase_storage import get_object_store

    application = create_application()

    async def override_db_session():
        try:
            yield db_session
            await db_session.commit()
        except Exception:
            await db_session.rollback()
            raise

    async def override_identity_gateway():
        return identity

    async def override_registry():
        return registry

    application.dependency_overrides[get_db_session] = override_db_session
    application.dependency_overrides[get_identity_gateway] = override_identity_gateway
    application.dependency_overrides[get_object_store] = lambda: object_store
    application.dependency_overrides[get_registry] = override_registry
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
