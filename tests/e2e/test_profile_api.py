"""End-to-end tests for the profile API."""

from uuid import uuid4

import pytest

from tests.e2e.api_client import login, make_client


@pytest.fixture
def client():
    """Test client authenticated as an administrator."""
    with make_client() as client:
        yield login(client)


def create_profile(client, name: str, **body) -> dict:
    response = client.post("/profiles", json={"name": name, **body})
    assert response.status_code == 201, response.text
    return response.json()["profile"]


class TestProfileApi:
    """Profile endpoints."""

    def test_set_default_swaps_flag(self, client):
        a = create_profile(client, "A")
        b = create_profile(client, "B")
        assert a["is_default"] is True
        assert b["is_default"] is False

        response = client.post(f"/profiles/{b['profile_id']}/default")

        assert response.status_code == 200
        profiles = {p["name"]: p for p in client.get("/profiles").json()["profiles"]}
        assert profiles["A"]["is_default"] is False
        assert profiles["B"]["is_default"] is True
        assert client.get("/profiles/default").json()["profile"]["name"] == "B"

    def test_default_profile_hides_template_reference_without_session(self, client):
        profile = create_profile(
            client, "Standard", template_user_ref="media-template-123"
        )
        client.cookies.clear()

        response = client.get("/profiles/default")

        assert response.status_code == 200
        assert response.json()["profile"] == {
            "profile_id": profile["profile_id"],
            "name": "Standard",
        }

    def test_delete_guards(self, client):
        a = create_profile(client, "A")
        b = create_profile(client, "B")

        # Default profile cannot be deleted
        response = client.delete(f"/profiles/{a['profile_id']}")
        assert response.status_code == 400
        assert "default" in response.json()["detail"]

        # Referenced profile cannot be deleted, and says why
        client.post("/invites", json={"profile_id": b["profile_id"]})
        response = client.delete(f"/profiles/{b['profile_id']}")
        assert response.status_code == 400
        assert response.json()["invite_count"] == 1

        invites = client.get(f"/profiles/{b['profile_id']}/invites").json()
        assert invites["total"] == 1

    def test_delete_unused_profile(self, client):
        create_profile(client, "A")
        spare = create_profile(client, "Spare")

        assert client.delete(f"/profiles/{spare['profile_id']}").status_code == 200
        assert client.get(f"/profiles/{spare['profile_id']}").status_code == 404

    def test_duplicate_name_conflicts(self, client):
        create_profile(client, "Standard")

        response = client.post("/profiles", json={"name": "Standard"})

        assert response.status_code == 409
        assert response.json()["error"] == "conflict"

    def test_patch_profile(self, client):
        profile = create_profile(client, "Standard", template_user_ref="tmpl")

        response = client.patch(
            f"/profiles/{profile['profile_id']}", json={"name": "Basic"}
        )

        assert response.status_code == 200
        updated = response.json()["profile"]
        assert updated["name"] == "Basic"
        assert updated["template_user_ref"] == "tmpl"

    def test_patch_null_name_rejected(self, client):
        profile = create_profile(client, "Standard")

        response = client.patch(
            f"/profiles/{profile['profile_id']}", json={"name": None}
        )

        assert response.status_code == 400

    def test_blank_name_rejected(self, client):
        response = client.post("/profiles", json={"name": "   "})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "invalid"
        assert "1-100 characters" in body["detail"]
        assert len(body["errors"]) == 1

    def test_set_default_unknown_profile(self, client):
        response = client.post(f"/profiles/{uuid4()}/default")

        assert response.status_code == 404

    def test_malformed_id_rejected(self, client):
        assert client.get("/profiles/not-a-uuid").status_code == 422

    def test_default_profile_is_public(self, client):
        create_profile(client, "Standard")
        client.cookies.clear()

        response = client.get("/profiles/default")

        assert response.status_code == 200
        assert response.json()["profile"]["name"] == "Standard"
        assert client.get("/profiles").status_code == 401

    def test_members_cannot_manage_profiles(self, client):
        login(client, is_admin=False)

        assert client.post("/profiles", json={"name": "X"}).status_code == 403


class TestHealth:
    """Health endpoint."""

    def test_health(self):
        with make_client() as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
