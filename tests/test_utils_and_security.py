import time

import pytest
from jose import jwt

from app.modules.user_management.infrastructure.external.supabase_auth import SupabaseIdentityGateway
from app.shared.core.exceptions import (
    AuthenticationError,
    FileTooLargeError,
    InvalidFileTypeError,
    OnboardingPersistenceError,
)
from app.shared.core.security import SecurityManager
from app.shared.infrastructure.storage.supabase_storage import (
    bucket_for_category,
    build_storage_path,
    validate_image_file,
)
from app.shared.utils.formatters import format_price, generate_slug
from app.shared.utils.validators import validate_slug, validate_website

SECRET = "unit-test-secret"


def make_token(secret: str = SECRET, **claims) -> str:
    payload = {
        "sub": "3f1c1d6e-2f4b-4c7e-9d0a-1b2c3d4e5f60",
        "email": "ana@example.com",
        "aud": "authenticated",
        "role": "authenticated",
        "exp": int(time.time()) + 3600,
    }
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


class TestExceptions:
    """Error payloads carried into the response envelope"""

    def test_persistence_error_payload(self):
        error = OnboardingPersistenceError(stage="business", compensated=False, profile_restored=True)

        payload = error.to_dict()["error"]

        assert payload["code"] == error.error_code
        assert payload["details"]["stage"] == "business"
        assert payload["details"]["compensated"] is False
        assert payload["details"]["profile_restored"] is True

    def test_profile_restored_omitted_when_unknown(self):
        assert "profile_restored" not in OnboardingPersistenceError(stage="profile").details


class TestFormatters:
    """Display helpers"""

    @pytest.mark.parametrize("cents,expected", [
        (0, "$0.00"),
        (None, "$0.00"),
        (2999, "$29.99"),
        (123456, "$1,234.56"),
    ])
    def test_format_price(self, cents, expected):
        assert format_price(cents) == expected

    def test_format_price_other_currency(self):
        assert format_price(1000, "eur") == "€10.00"
        assert format_price(1000, "JPY") == "JPY 10.00"

    @pytest.mark.parametrize("text,expected", [
        ("Miami Beach", "miami-beach"),
        ("  St. Louis  ", "st-louis"),
        ("Smoke & Oak -- Lounge", "smoke-oak-lounge"),
        ("", ""),
    ])
    def test_generate_slug(self, text, expected):
        assert generate_slug(text) == expected

    def test_generate_slug_truncates_cleanly(self):
        slug = generate_slug("word " * 40, max_length=12)
        assert len(slug) <= 12
        assert not slug.endswith("-")


class TestValidators:
    """Input validators"""

    @pytest.mark.parametrize("slug", ["miami", "new-york-2"])
    def test_valid_slugs(self, slug):
        assert validate_slug(slug).is_valid

    @pytest.mark.parametrize("slug", ["", "Miami", "new--york", "-miami", "miami beach"])
    def test_invalid_slugs(self, slug):
        assert not validate_slug(slug).is_valid

    @pytest.mark.parametrize("url,valid", [
        ("", True),
        ("smokehouse.com", True),
        ("https://smokehouse.com/menu", True),
        ("ftp://smokehouse.com", False),
        ("localhost", False),
    ])
    def test_validate_website(self, url, valid):
        assert validate_website(url).is_valid is valid


class TestStoragePaths:
    """Object keys and buckets"""

    def test_path_layout(self):
        path = build_storage_path("covers", "user-1", "front.png", 1700000000000)
        assert path == "covers/user-1/1700000000000-front.png"

    def test_unsafe_filename_characters_are_replaced(self):
        path = build_storage_path("images", "user-1", "../my photo (1).png", 1)
        assert path == "images/user-1/1-my-photo-1-.png"

    def test_unknown_category(self):
        with pytest.raises(ValueError):
            build_storage_path("videos", "user-1", "clip.mp4", 1)

    def test_buckets_per_category(self):
        assert bucket_for_category("avatars") == "profiles"
        assert bucket_for_category("covers") == "businesses"
        assert bucket_for_category("images") == "businesses"


class TestImageValidation:
    """Checks applied when a file is picked"""

    def test_valid_png(self, png_bytes):
        validate_image_file(png_bytes, "image/png", "ok.png")

    def test_too_large(self, png_bytes):
        with pytest.raises(FileTooLargeError):
            validate_image_file(png_bytes, "image/png", "big.png", max_file_size=10)

    def test_disallowed_type(self, png_bytes):
        with pytest.raises(InvalidFileTypeError):
            validate_image_file(png_bytes, "application/pdf", "doc.pdf")

    def test_corrupt_image(self):
        with pytest.raises(InvalidFileTypeError):
            validate_image_file(b"not really a png", "image/png", "fake.png")


class TestSecurityManager:
    """Local JWT verification"""

    def test_valid_token(self):
        payload = SecurityManager(secret_key=SECRET).verify_token(make_token())
        assert payload["email"] == "ana@example.com"

    def test_wrong_secret(self):
        with pytest.raises(AuthenticationError):
            SecurityManager(secret_key=SECRET).verify_token(make_token(secret="other-secret"))

    def test_expired_token(self):
        with pytest.raises(AuthenticationError) as exc_info:
            SecurityManager(secret_key=SECRET).verify_token(make_token(exp=int(time.time()) - 60))
        assert exc_info.value.message == "Token expired"

    def test_wrong_audience(self):
        with pytest.raises(AuthenticationError):
            SecurityManager(secret_key=SECRET).verify_token(make_token(aud="anon"))

    def test_missing_subject(self):
        with pytest.raises(AuthenticationError):
            SecurityManager(secret_key=SECRET).verify_token(make_token(sub=""))

    def test_token_data(self):
        manager = SecurityManager(secret_key=SECRET)
        data = manager.token_data(manager.verify_token(make_token()))
        assert data.user_id == "3f1c1d6e-2f4b-4c7e-9d0a-1b2c3d4e5f60"
        assert data.expires_at is not None

    def test_no_secret_cannot_verify_locally(self):
        manager = SecurityManager(secret_key="")
        assert manager.can_verify_locally is False
        with pytest.raises(AuthenticationError):
            manager.verify_token(make_token())


class TestSupabaseIdentityGateway:
    """Resolving the caller from a bearer token"""

    def gateway(self, token):
        return SupabaseIdentityGateway(
            access_token=token,
            manager=object(),
            security=SecurityManager(secret_key=SECRET),
        )

    async def test_anonymous(self):
        assert await self.gateway(None).current_user() is None

    async def test_valid_token(self):
        user = await self.gateway(make_token()).current_user()
        assert user.id == "3f1c1d6e-2f4b-4c7e-9d0a-1b2c3d4e5f60"
        assert user.email == "ana@example.com"

    async def test_invalid_token_is_anonymous(self):
        assert await self.gateway("garbage").current_user() is None
