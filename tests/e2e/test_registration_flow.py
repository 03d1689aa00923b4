"""End-to-end tests for the registration, review and check-in flow."""

import json

import httpx
import pytest
import pytest_asyncio
from dishka.integrations.fastapi import FastapiProvider

from summit.domain.repository import DelegateRepository, EventRepository
from summit.domain.service import EmailSender, JobQueue
from summit.interface.api.app import create_app
from tests.conftest import (
    admin_token,
    delegate_token,
    image_bytes,
    make_delegate,
    make_event,
    registration_payload,
)
from tests.di import build_test_container


@pytest_asyncio.fixture
async def e2e_env():
    """App wired to mock adapters, with the 2026 event seeded."""
    container = build_test_container(None, FastapiProvider())
    events = await container.get(EventRepository)
    await events.save(make_event(2026))

    app = create_app(container)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client, container
    await container.close()


def _form_data(payload: dict) -> dict:
    """Encode nested objects as JSON strings the way the web form does."""
    return {
        key: json.dumps(value) if isinstance(value, dict) else value
        for key, value in payload.items()
    }


def _admin() -> dict:
    return {"Authorization": f"Bearer {admin_token()}"}


async def _register(client: httpx.AsyncClient, **overrides) -> httpx.Response:
    return await client.post(
        "/delegates/",
        data=_form_data(registration_payload(**overrides)),
        files={"profile_picture": ("me.png", image_bytes("PNG"), "image/png")},
    )


class TestRegistrationFlow:
    """Register, approve, log in and check in."""

    @pytest.mark.asyncio
    async def test_full_flow(self, e2e_env):
        client, container = e2e_env

        # Register
        response = await _register(client)
        assert response.status_code == 201
        delegate = response.json()
        assert delegate["status"] == "pending"
        assert delegate["email"] == "kwame.mensah@conference.org"
        assert delegate["languages_spoken"] == ["English", "Twi"]
        assert delegate["profile_picture"].endswith("/me.png")
        assert "password_hash" not in delegate
        delegate_id = delegate["id"]

        queue = await container.get(JobQueue)
        [job] = queue.jobs
        assert job["payload"]["delegate_id"] == delegate_id

        # Not approved yet
        response = await client.post(
            "/delegates/login",
            json={"email": "kwame.mensah@conference.org", "password": "secret-pass"},
        )
        assert response.status_code == 401

        # Approve
        response = await client.post(
            f"/delegates/{delegate_id}/approve",
            json={"approved_by": "admin-1"},
            headers=_admin(),
        )
        assert response.status_code == 200
        assert response.json()["status"] == "approved"

        email = await container.get(EmailSender)
        assert [m.subject for m in email.sent] == [
            "Registration Confirmation",
            "Your Registration has been Approved!",
        ]

        # Log in
        response = await client.post(
            "/delegates/login",
            json={"email": "Kwame.Mensah@conference.org", "password": "secret-pass"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["id"] == delegate_id
        assert body["token"]
        assert body["expires_in"] > 0

        response = await client.post(
            "/delegates/login",
            json={"email": "kwame.mensah@conference.org", "password": "wrong-pass"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials or delegate not found."

        # Badge
        response = await client.get(f"/delegates/{delegate_id}/badge")
        assert response.status_code == 200
        assert response.headers["content-type"] == "image/png"
        assert f'filename="badge-{delegate_id}.png"' in response.headers[
            "content-disposition"
        ]

        # Check in
        response = await client.post(
            f"/delegates/{delegate_id}/check-in",
            json={"check_in_location": "Main Hall"},
            headers=_admin(),
        )
        assert response.status_code == 200
        checked_in = response.json()
        assert checked_in["status"] == "checked_in"
        assert checked_in["has_checked_in"] is True
        assert checked_in["checked_in_by"] == "admin-1"

        response = await client.post(
            f"/delegates/{delegate_id}/check-in", headers=_admin()
        )
        assert response.status_code == 400
        assert response.json()["error"] == "invalid_state"

    @pytest.mark.asyncio
    async def test_duplicate_registration(self, e2e_env):
        client, _ = e2e_env
        assert (await _register(client)).status_code == 201

        response = await _register(client, email="kwame.mensah@conference.org")

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_registration_for_unknown_year(self, e2e_env):
        client, _ = e2e_env

        response = await _register(client, event_year=2031)

        assert response.status_code == 404
        assert response.json()["detail"] == "Event for year 2031 not found"

    @pytest.mark.asyncio
    async def test_invalid_registration(self, e2e_env):
        client, _ = e2e_env

        response = await _register(client, email="not-an-email")

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"

    @pytest.mark.asyncio
    async def test_reject_then_approve(self, e2e_env):
        client, _ = e2e_env
        delegate_id = (await _register(client)).json()["id"]

        response = await client.post(
            f"/delegates/{delegate_id}/reject",
            json={"rejection_reason": "Missing passport scan", "rejected_by": "admin-1"},
            headers=_admin(),
        )
        assert response.status_code == 200
        assert response.json()["rejection_reason"] == "Missing passport scan"

        response = await client.post(
            f"/delegates/{delegate_id}/approve",
            json={"approved_by": "admin-1"},
            headers=_admin(),
        )
        assert response.status_code == 200

        response = await client.post(
            f"/delegates/{delegate_id}/approve",
            json={"approved_by": "admin-1"},
            headers=_admin(),
        )
        assert response.status_code == 400
        assert response.json()["error"] == "already_in_state"


class TestAdminAccess:
    """Administrative routes require an admin bearer token."""

    @pytest.mark.asyncio
    async def test_missing_token(self, e2e_env):
        client, _ = e2e_env

        response = await client.get("/delegates/")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_delegate_token_is_forbidden(self, e2e_env):
        client, container = e2e_env
        repo = await container.get(DelegateRepository)
        delegate = await repo.save(make_delegate())

        response = await client.get(
            "/delegates/",
            headers={"Authorization": f"Bearer {delegate_token(delegate)}"},
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_invalid_token(self, e2e_env):
        client, _ = e2e_env

        response = await client.get(
            "/delegates/statistics", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_list_update_statistics_and_delete(self, e2e_env):
        client, _ = e2e_env
        for i in range(3):
            await _register(client, email=f"delegate{i}@conference.org")

        response = await client.get(
            "/delegates/", params={"page": 1, "limit": 2}, headers=_admin()
        )
        assert response.status_code == 200
        page = response.json()
        assert page["total"] == 3
        assert page["total_pages"] == 2
        assert len(page["delegates"]) == 2

        delegate_id = page["delegates"][0]["id"]
        response = await client.patch(
            f"/delegates/{delegate_id}",
            json={"position": "Delegation Lead"},
            headers=_admin(),
        )
        assert response.status_code == 200
        assert response.json()["position"] == "Delegation Lead"

        response = await client.patch(
            f"/delegates/{delegate_id}", json={"status": "approved"}, headers=_admin()
        )
        assert response.status_code == 400

        response = await client.get("/delegates/statistics", headers=_admin())
        assert response.status_code == 200
        assert response.json()["by_type"] == {"observer": 3}
        assert response.json()["by_nationality"] == {"Ghanaian": 3}

        response = await client.delete(f"/delegates/{delegate_id}", headers=_admin())
        assert response.status_code == 204

        response = await client.get(f"/delegates/{delegate_id}", headers=_admin())
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_lookup_by_email(self, e2e_env):
        client, _ = e2e_env
        await _register(client)

        response = await client.get(
            "/delegates/email/KWAME.MENSAH@conference.org", headers=_admin()
        )

        assert response.status_code == 200
        assert response.json()["first_name"] == "Kwame"

    @pytest.mark.asyncio
    async def test_malformed_delegate_id(self, e2e_env):
        client, _ = e2e_env

        response = await client.get("/delegates/not-a-uuid", headers=_admin())

        assert response.status_code == 400


class TestPublicRoutes:
    """Routes that need no token."""

    @pytest.mark.asyncio
    async def test_health(self, e2e_env):
        client, _ = e2e_env

        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_password_reset_flow(self, e2e_env):
        client, container = e2e_env
        await _register(client)

        response = await client.post(
            "/delegates/request-password-reset",
            json={"email": "kwame.mensah@conference.org"},
        )
        assert response.status_code == 200

        repo = await container.get(DelegateRepository)
        delegate = await repo.find_by_email("kwame.mensah@conference.org")
        response = await client.post(
            "/delegates/confirm-password-reset",
            json={
                "email": "kwame.mensah@conference.org",
                "reset_token": delegate.reset_password_pin,
                "new_password": "another-pass",
            },
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Your password has been successfully reset."

    @pytest.mark.asyncio
    async def test_confirm_reset_accepts_camel_case_token(self, e2e_env):
        client, container = e2e_env
        await _register(client)
        await client.post(
            "/delegates/request-password-reset",
            json={"email": "kwame.mensah@conference.org"},
        )
        repo = await container.get(DelegateRepository)
        delegate = await repo.find_by_email("kwame.mensah@conference.org")

        response = await client.post(
            "/delegates/confirm-password-reset",
            json={
                "email": "kwame.mensah@conference.org",
                "resetToken": delegate.reset_password_pin,
                "new_password": "another-pass",
            },
        )

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_confirm_reset_non_ascii_token_is_bad_request(self, e2e_env):
        client, _ = e2e_env
        await _register(client)
        await client.post(
            "/delegates/request-password-reset",
            json={"email": "kwame.mensah@conference.org"},
        )

        response = await client.post(
            "/delegates/confirm-password-reset",
            json={
                "email": "kwame.mensah@conference.org",
                "reset_token": "12345\u00e9",
                "new_password": "another-pass",
            },
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid password reset PIN."

    @pytest.mark.asyncio
    async def test_push_token_registration(self, e2e_env):
        client, container = e2e_env
        repo = await container.get(DelegateRepository)
        delegate = await repo.save(make_delegate())

        response = await client.post(
            f"/delegates/delegate/{delegate.id}/push-token",
            json={"token": "ExpoPushToken[device-1]"},
            headers={"Authorization": f"Bearer {delegate_token(delegate)}"},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Push token registered successfully."
