import asyncio

import pytest

from app.modules.directory.domain.models.lounge import LoungeStatus, SubscriptionStatus
from app.shared.infrastructure.storage.supabase_storage import get_object_store

from conftest import FakeObjectStore, new_id

API = "/api/v1"


def png_upload(name: str, payload: bytes):
    return (name, payload, "image/png")


class GatedObjectStore(FakeObjectStore):
    """Holds every upload until ``release`` is set."""

    def __init__(self):
        super().__init__()
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def upload(self, bucket, path, data, content_type):
        self.started.set()
        await self.release.wait()
        return await super().upload(bucket, path, data, content_type)


async def fill_wizard(client, base: str) -> None:
    """Complete the required steps and land on the website builder."""
    await client.patch(base, json={"full_name": "Ana Torres"})
    await client.post(f"{base}/next")
    await client.patch(base, json={"business_type": "lounge", "business_name": "Smoke House"})
    await client.post(f"{base}/skip-to-website-builder")


class TestHealthAndInfo:
    """Unauthenticated service endpoints"""

    async def test_health(self, client):
        response = await client.get(f"{API}/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_api_info_lists_routes(self, client):
        response = await client.get(f"{API}/")
        assert response.status_code == 200
        assert response.json()["routes"]["onboarding"] == "/onboarding"


class TestErrorEnvelope:
    """Error responses share one shape"""

    async def test_unauthenticated_request(self, client):
        response = await client.post(f"{API}/onboarding/sessions")

        assert response.status_code == 401
        error = response.json()["error"]
        assert error["code"] == "AUTHENTICATION_ERROR"
        assert "timestamp" in error
        assert response.headers["X-Error-Code"] == "AUTHENTICATION_ERROR"

    async def test_unknown_route(self, client):
        response = await client.get(f"{API}/does-not-exist")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    async def test_request_validation(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile())
        session = (await client.post(f"{API}/onboarding/sessions")).json()

        response = await client.patch(
            f"{API}/onboarding/sessions/{session['id']}", json={"favourite_cigar": "Cohiba"}
        )

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestOnboardingFlow:
    """The wizard driven over HTTP"""

    async def test_status_routes_new_owner_to_onboarding(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile())

        response = await client.get(f"{API}/onboarding/status")

        assert response.status_code == 200
        assert response.json()["onboarding_completed"] is False
        assert response.json()["route"] == "/onboarding"

    async def test_start_prefills_and_resumes(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile(full_name="Ana Torres"))

        first = await client.post(f"{API}/onboarding/sessions")
        second = await client.post(f"{API}/onboarding/sessions")

        assert first.status_code == 201
        body = first.json()
        assert body["current_step"] == 1
        assert body["total_steps"] == 5
        assert body["progress"] == 20.0
        assert body["data"]["full_name"] == "Ana Torres"
        assert body["can_proceed"] is True
        assert second.json()["id"] == body["id"]

    async def test_next_is_gated_on_business_info(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile(full_name="Ana"))
        session_id = (await client.post(f"{API}/onboarding/sessions")).json()["id"]
        base = f"{API}/onboarding/sessions/{session_id}"

        assert (await client.post(f"{base}/next")).json()["current_step"] == 2
        blocked = await client.post(f"{base}/next")
        assert blocked.status_code == 200
        assert blocked.json()["current_step"] == 2
        assert blocked.json()["can_proceed"] is False

        await client.patch(base, json={"business_type": "lounge", "business_name": "Smoke House"})
        assert (await client.post(f"{base}/next")).json()["current_step"] == 3
        assert (await client.post(f"{base}/back")).json()["current_step"] == 2

    async def test_other_owner_cannot_read_session(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile())
        session_id = (await client.post(f"{API}/onboarding/sessions")).json()["id"]

        identity.sign_in(await seed_profile())
        response = await client.get(f"{API}/onboarding/sessions/{session_id}")

        assert response.status_code == 403

    async def test_staged_images_preview_and_remove(self, client, identity, seed_profile, png_bytes):
        identity.sign_in(await seed_profile())
        session_id = (await client.post(f"{API}/onboarding/sessions")).json()["id"]
        base = f"{API}/onboarding/sessions/{session_id}"

        response = await client.post(f"{base}/gallery", files=[
            ("files", png_upload("one.png", png_bytes)),
            ("files", png_upload("two.png", png_bytes)),
            ("files", png_upload("three.png", png_bytes)),
        ])
        gallery = response.json()["uploads"]["gallery"]
        assert [item["filename"] for item in gallery] == ["one.png", "two.png", "three.png"]

        preview = await client.get(gallery[0]["preview_url"])
        assert preview.status_code == 200
        assert preview.content == png_bytes
        assert preview.headers["content-type"] == "image/png"

        response = await client.delete(f"{base}/gallery/1")
        assert [item["filename"] for item in response.json()["uploads"]["gallery"]] == ["one.png", "three.png"]

        removed = await client.get(gallery[1]["preview_url"])
        assert removed.status_code == 404

    async def test_non_image_is_rejected_at_selection(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile())
        session_id = (await client.post(f"{API}/onboarding/sessions")).json()["id"]

        response = await client.put(
            f"{API}/onboarding/sessions/{session_id}/avatar",
            files={"file": ("notes.txt", b"hello", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_FILE_TYPE"

    async def test_submit_before_final_step_is_blocked(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile(full_name="Ana"))
        session_id = (await client.post(f"{API}/onboarding/sessions")).json()["id"]

        response = await client.post(f"{API}/onboarding/sessions/{session_id}/submit")

        assert response.status_code == 422
        assert response.json()["error"]["details"]["kind"] == "validation_blocked"

    async def test_full_onboarding(self, client, identity, object_store, seed_profile, seed_city, png_bytes):
        """Start, fill every step, stage images, submit, then land on billing"""
        owner_id = await seed_profile()
        await seed_city("Miami")
        identity.sign_in(owner_id)
        session_id = (await client.post(f"{API}/onboarding/sessions")).json()["id"]
        base = f"{API}/onboarding/sessions/{session_id}"

        await client.patch(base, json={"full_name": "Ana Torres", "phone": "555-0100"})
        await client.put(f"{base}/avatar", files={"file": png_upload("me.png", png_bytes)})
        await client.post(f"{base}/next")
        await client.patch(base, json={
            "business_type": "lounge",
            "business_name": "Smoke House",
            "city": "miami",
            "address": "1 Ocean Dr",
        })
        await client.post(f"{base}/next")
        await client.patch(base, json={"instagram": "@smokehouse"})
        await client.post(f"{base}/next")
        await client.put(f"{base}/cover", files={"file": png_upload("front.png", png_bytes)})
        await client.post(f"{base}/next")
        state = (await client.patch(base, json={"wants_website": True, "selected_plan": "pro"})).json()
        assert state["current_step"] == 5
        assert state["progress"] == 100.0

        response = await client.post(f"{base}/submit")

        assert response.status_code == 200
        body = response.json()
        assert body["outcome"] == "completed"
        assert body["redirect_to"] == "/dashboard/billing?upgrade=pro"
        assert body["lounge_id"]
        assert len(object_store.uploads) == 2

        status = (await client.get(f"{API}/onboarding/status")).json()
        assert status == {"onboarding_completed": True, "route": "/dashboard", "session_id": None}

        lounges = (await client.get(f"{API}/dashboard/lounges")).json()
        assert [lounge["name"] for lounge in lounges] == ["Smoke House"]
        assert lounges[0]["status"] == "pending"
        assert lounges[0]["instagram"] == "@smokehouse"

        gone = await client.get(base)
        assert gone.status_code == 404

    async def test_session_is_locked_while_submitting(self, app, client, identity, seed_profile, png_bytes):
        """Edits and discards wait for a running submission instead of changing what it writes"""
        store = GatedObjectStore()
        app.dependency_overrides[get_object_store] = lambda: store
        identity.sign_in(await seed_profile())
        session_id = (await client.post(f"{API}/onboarding/sessions")).json()["id"]
        base = f"{API}/onboarding/sessions/{session_id}"
        await fill_wizard(client, base)
        await client.put(f"{base}/cover", files={"file": png_upload("front.png", png_bytes)})

        submit = asyncio.create_task(client.post(f"{base}/submit"))
        await asyncio.wait_for(store.started.wait(), timeout=5)

        edited = await client.patch(base, json={"business_name": "Changed", "business_type": "manufacturer"})
        discarded = await client.delete(base)
        moved = await client.post(f"{base}/back")
        store.release.set()
        response = await submit

        for blocked in (edited, discarded, moved):
            assert blocked.status_code == 422
            assert blocked.json()["error"]["details"]["rule"] == "submission_in_progress"

        assert response.status_code == 200
        assert response.json()["outcome"] == "completed"
        lounges = (await client.get(f"{API}/dashboard/lounges")).json()
        assert [lounge["name"] for lounge in lounges] == ["Smoke House"]


class TestDirectoryApi:
    """Public directory and owner dashboard"""

    async def test_city_page_is_public(self, client, seed_city, seed_lounge):
        city = await seed_city("Miami")
        await seed_lounge("Live", city_id=city.id, status=LoungeStatus.APPROVED)
        await seed_lounge("Waiting", city_id=city.id)

        response = await client.get(f"{API}/cities/miami")

        assert response.status_code == 200
        assert response.json()["total"] == 1
        assert response.json()["lounges"][0]["name"] == "Live"

    async def test_unknown_lounge_type_filter(self, client, seed_city):
        await seed_city("Miami")
        response = await client.get(f"{API}/cities/miami", params={"lounge_type": "Casino"})
        assert response.status_code == 422

    async def test_owner_dashboard_stats(self, client, identity, seed_profile, seed_lounge):
        owner_id = await seed_profile()
        await seed_lounge("Live", owner_id=owner_id, status=LoungeStatus.APPROVED,
                          subscription_status=SubscriptionStatus.ACTIVE)
        await seed_lounge("Waiting", owner_id=owner_id)
        await seed_lounge("Elsewhere", owner_id=await seed_profile(), status=LoungeStatus.APPROVED)
        identity.sign_in(owner_id)

        response = await client.get(f"{API}/dashboard/stats")

        assert response.status_code == 200
        assert response.json() == {"total": 2, "approved": 1, "pending": 1, "active_subscriptions": 1}

    async def test_dashboard_stats_need_sign_in(self, client):
        response = await client.get(f"{API}/dashboard/stats")
        assert response.status_code == 401

    async def test_owner_cannot_patch_moderation_fields(self, client, identity, seed_profile, seed_lounge):
        owner_id = await seed_profile()
        lounge = await seed_lounge(owner_id=owner_id)
        identity.sign_in(owner_id)

        response = await client.patch(f"{API}/dashboard/lounges/{lounge.id}", json={"is_featured": True})

        assert response.status_code == 422

    async def test_owner_website_must_be_a_url(self, client, identity, seed_profile, seed_lounge):
        owner_id = await seed_profile()
        lounge = await seed_lounge(owner_id=owner_id)
        identity.sign_in(owner_id)

        response = await client.patch(f"{API}/dashboard/lounges/{lounge.id}", json={"website": "not a url"})

        assert response.status_code == 422

    async def test_owner_cannot_patch_foreign_lounge(self, client, identity, seed_profile, seed_lounge):
        lounge = await seed_lounge(owner_id=await seed_profile())
        identity.sign_in(await seed_profile())

        response = await client.patch(f"{API}/dashboard/lounges/{lounge.id}", json={"name": "Mine now"})

        assert response.status_code == 404


class TestAdminApi:
    """Admin-only endpoints"""

    async def test_owner_is_forbidden(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile())
        response = await client.get(f"{API}/admin/stats")
        assert response.status_code == 403
        assert response.json()["error"]["code"] == "AUTHORIZATION_ERROR"

    async def test_admin_approves_lounge(self, client, identity, seed_profile, seed_lounge):
        identity.sign_in(await seed_profile(role="admin"))
        lounge = await seed_lounge()

        response = await client.post(
            f"{API}/admin/lounges/{lounge.id}/status", json={"status": "approved"}
        )

        assert response.status_code == 200
        assert response.json()["status"] == "approved"
        public = await client.get(f"{API}/lounges/{lounge.id}")
        assert public.status_code == 200

    async def test_admin_stats(self, client, identity, seed_profile, seed_lounge):
        identity.sign_in(await seed_profile(role="admin"))
        await seed_lounge()

        response = await client.get(f"{API}/admin/stats")

        assert response.status_code == 200
        assert response.json()["pending_lounges"] == 1
        assert response.json()["total_users"] == 1

    async def test_admin_creates_plan_and_public_sees_it(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile(role="admin"))

        created = await client.post(f"{API}/admin/plans", json={
            "name": "Pro", "slug": "pro", "price_monthly": 4900, "price_yearly": 49000,
        })
        assert created.status_code == 201

        plans = (await client.get(f"{API}/billing/plans")).json()
        assert [plan["slug"] for plan in plans] == ["pro"]

    async def test_admin_user_role_change(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile(role="admin"))
        target = await seed_profile(full_name="Ana")

        response = await client.patch(f"{API}/admin/users/{target}", json={"role": "admin"})

        assert response.status_code == 200
        assert response.json()["role"] == "admin"

    async def test_unknown_profile(self, client, identity, seed_profile):
        identity.sign_in(await seed_profile(role="admin"))
        response = await client.patch(f"{API}/admin/users/{new_id()}", json={"full_name": "Ghost"})
        assert response.status_code == 404
