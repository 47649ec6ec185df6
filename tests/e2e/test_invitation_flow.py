"""End-to-end tests for the invitation lifecycle."""

from uuid import uuid4

import pytest

from assess.domain.value import UserRole
from assess.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import make_user

ACCEPTANCE = {
    "email": "jane@co.com",
    "first_name": "Jane",
    "last_name": "Doe",
    "password": "correct horse",
}


@pytest.fixture
def manager(resolve):
    user = make_user("boss@co.com", UserRole.MANAGER)
    resolve(InMemoryDatabase).tables.users[user.id] = user
    return user


@pytest.fixture
def invitation(client, manager):
    """A pending invitation created through the API."""
    response = client.post(
        "/invitations",
        json={
            "manager_id": str(manager.id),
            "template_id": 3,
            "period_id": 7,
            "email": "jane@co.com",
            "first_name": "Jane",
        },
    )
    assert response.status_code == 201
    data = response.json()
    return {
        "id": data["invitation"]["id"],
        "token": data["invitation_url"].rsplit("/", 1)[-1],
    }


class TestCreateInvitation:
    """Tests for POST /invitations."""

    def test_create_hides_token(self, client, manager):
        response = client.post(
            "/invitations",
            json={
                "manager_id": str(manager.id),
                "template_id": 3,
                "period_id": 7,
                "email": "jane@co.com",
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert "token" not in data["invitation"]
        assert data["invitation"]["status"] == "pending"

    def test_create_duplicate(self, client, manager, invitation):
        response = client.post(
            "/invitations",
            json={
                "manager_id": str(manager.id),
                "template_id": 3,
                "period_id": 7,
                "email": "JANE@co.com",
            },
        )

        assert response.status_code == 409

    def test_create_unknown_manager(self, client):
        response = client.post(
            "/invitations",
            json={
                "manager_id": str(uuid4()),
                "template_id": 3,
                "period_id": 7,
                "email": "jane@co.com",
            },
        )

        assert response.status_code == 404


class TestListAndValidate:
    """Tests for GET /invitations and GET /invitations/token/{token}."""

    def test_list_by_manager(self, client, manager, invitation):
        response = client.get("/invitations", params={"manager_id": str(manager.id)})

        assert response.status_code == 200
        assert [i["id"] for i in response.json()["invitations"]] == [invitation["id"]]

    def test_list_by_email(self, client, invitation):
        response = client.get("/invitations", params={"email": "jane@co.com"})

        assert response.status_code == 200
        assert len(response.json()["invitations"]) == 1

    @pytest.mark.parametrize(
        "params", [{}, {"manager_id": str(uuid4()), "email": "jane@co.com"}]
    )
    def test_list_requires_one_filter(self, client, params):
        response = client.get("/invitations", params=params)

        assert response.status_code == 400

    def test_validate_token(self, client, invitation):
        response = client.get(f"/invitations/token/{invitation['token']}")

        assert response.status_code == 200
        data = response.json()
        assert data["valid"] is True
        assert data["invitation_id"] == invitation["id"]

    def test_validate_unknown_token(self, client):
        response = client.get("/invitations/token/nope")

        assert response.status_code == 200
        assert response.json()["valid"] is False


class TestAcceptInvitation:
    """Tests for POST /invitations/{id}/accept."""

    def test_accept_then_replay(self, client, resolve, manager, invitation):
        """Should provision once and answer 410 afterwards."""
        # Act
        first = client.post(f"/invitations/{invitation['id']}/accept", json=ACCEPTANCE)
        second = client.post(
            f"/invitations/{invitation['id']}/accept", json=ACCEPTANCE
        )

        # Assert
        assert first.status_code == 200
        data = first.json()
        assert data["success"] is True
        tables = resolve(InMemoryDatabase).tables
        assert len(tables.assessment_instances) == 1
        [relationship] = tables.manager_relationships.values()
        assert relationship.manager_id == manager.id
        assert second.status_code == 410
        assert second.json()["detail"] == "invitation already used or expired"

    @pytest.mark.parametrize("invitation_id", [str(uuid4()), "not-a-uuid"])
    def test_accept_unknown(self, client, invitation_id):
        response = client.post(f"/invitations/{invitation_id}/accept", json=ACCEPTANCE)

        assert response.status_code == 404
        assert response.json()["detail"] == "invitation not found"

    def test_accept_email_mismatch(self, client, invitation):
        response = client.post(
            f"/invitations/{invitation['id']}/accept",
            json={**ACCEPTANCE, "email": "john@co.com"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "email mismatch"

    def test_accept_user_exists(self, client, resolve, invitation):
        existing = make_user("jane@co.com", UserRole.USER)
        resolve(InMemoryDatabase).tables.users[existing.id] = existing

        response = client.post(
            f"/invitations/{invitation['id']}/accept", json=ACCEPTANCE
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "user already exists"

    def test_accept_missing_password(self, client, invitation):
        body = {k: v for k, v in ACCEPTANCE.items() if k != "password"}

        response = client.post(f"/invitations/{invitation['id']}/accept", json=body)

        assert response.status_code == 422


class TestManageInvitation:
    """Tests for decline, status overwrite, reminders, delete and cleanup."""

    def test_decline_twice(self, client, invitation):
        first = client.post(f"/invitations/token/{invitation['token']}/decline")
        second = client.post(f"/invitations/token/{invitation['token']}/decline")

        assert first.status_code == 200
        assert first.json()["invitation"]["status"] == "declined"
        assert second.status_code == 409

    def test_decline_unknown(self, client):
        response = client.post("/invitations/token/nope/decline")

        assert response.status_code == 404

    def test_update_status(self, client, invitation):
        response = client.patch(
            f"/invitations/{invitation['id']}/status", json={"status": "accepted"}
        )

        assert response.status_code == 200
        data = response.json()["invitation"]
        assert data["status"] == "accepted"
        assert data["accepted_at"] is not None

    def test_update_status_unknown(self, client):
        response = client.patch(
            f"/invitations/{uuid4()}/status", json={"status": "expired"}
        )

        assert response.status_code == 404

    def test_reminder(self, client, invitation):
        response = client.post(f"/invitations/{invitation['id']}/reminders")

        assert response.status_code == 200
        assert response.json()["invitation"]["reminder_count"] == 1

    def test_reminder_after_decline(self, client, invitation):
        client.post(f"/invitations/token/{invitation['token']}/decline")

        response = client.post(f"/invitations/{invitation['id']}/reminders")

        assert response.status_code == 409

    def test_reminder_unknown(self, client):
        response = client.post(f"/invitations/{uuid4()}/reminders")

        assert response.status_code == 404

    def test_delete_twice(self, client, invitation):
        first = client.delete(f"/invitations/{invitation['id']}")
        second = client.delete(f"/invitations/{invitation['id']}")

        assert first.status_code == 204
        assert second.status_code == 204
        assert client.get(f"/invitations/token/{invitation['token']}").json()[
            "valid"
        ] is False

    def test_cleanup(self, client):
        response = client.post("/admin/cleanup")

        assert response.status_code == 200
        assert response.json() == {"magic_links_deleted": 0, "invitations_expired": 0}
