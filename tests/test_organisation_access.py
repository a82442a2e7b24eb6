"""
Tests for the organisation access lookup and the organisation routes.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from database.helpers import (
    OrganisationAccessError,
    create_user_with_default_organisation,
    get_organisation_data,
    list_user_organisations,
)
from database.models import Organisation


def _result(value):
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


class TestGetOrganisationData:
    @pytest.mark.asyncio
    async def test_no_membership_raises(self):
        session = MagicMock()
        session.execute = AsyncMock(return_value=_result(None))

        with pytest.raises(OrganisationAccessError, match="User does not have access to this organisation"):
            await get_organisation_data(session, "user123", "org123")
        assert session.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_membership_without_organisation_raises(self):
        session = MagicMock()
        session.execute = AsyncMock(
            side_effect=[_result(MagicMock(user_id="user123", org_id="org123")), _result(None)]
        )

        with pytest.raises(OrganisationAccessError):
            await get_organisation_data(session, "user123", "org123")

    @pytest.mark.asyncio
    async def test_member_gets_organisation(self):
        org = Organisation(org_id="org123", name="Test Org")
        session = MagicMock()
        session.execute = AsyncMock(
            side_effect=[_result(MagicMock(user_id="user123", org_id="org123")), _result(org)]
        )

        assert await get_organisation_data(session, "user123", "org123") is org

    @pytest.mark.asyncio
    async def test_against_database(self, db):
        alice = await create_user_with_default_organisation(
            db, first_name="Alice", last_name="A", email="alice@example.com", password_hash="x",
        )
        bob = await create_user_with_default_organisation(
            db, first_name="Bob", last_name="B", email="bob@example.com", password_hash="x",
        )
        await db.commit()

        alice_org = (await list_user_organisations(db, alice.user_id))[0]
        assert alice_org.name == "Alice's Organisation"

        found = await get_organisation_data(db, alice.user_id, alice_org.org_id)
        assert found.org_id == alice_org.org_id

        with pytest.raises(OrganisationAccessError):
            await get_organisation_data(db, bob.user_id, alice_org.org_id)


async def _register(client, first_name, email):
    res = await client.post("/auth/register", json={
        "firstName": first_name,
        "lastName": "Doe",
        "email": email,
        "password": "password123",
    })
    assert res.status_code == 201, res.text
    return res.json()["data"]


class TestOrganisationRoutes:
    @pytest.mark.asyncio
    async def test_list_own_organisations(self, client):
        data = await _register(client, "John", "john@example.com")
        headers = {"Authorization": f"Bearer {data['accessToken']}"}

        res = await client.get("/api/organisations", headers=headers)
        assert res.status_code == 200
        orgs = res.json()["data"]["organisations"]
        assert [o["name"] for o in orgs] == ["John's Organisation"]

        res = await client.get(f"/api/organisations/{orgs[0]['orgId']}", headers=headers)
        assert res.status_code == 200
        assert res.json()["data"]["name"] == "John's Organisation"

    @pytest.mark.asyncio
    async def test_other_users_organisation_forbidden(self, client):
        john = await _register(client, "John", "john@example.com")
        jane = await _register(client, "Jane", "jane@example.com")

        res = await client.get(
            "/api/organisations",
            headers={"Authorization": f"Bearer {john['accessToken']}"},
        )
        john_org_id = res.json()["data"]["organisations"][0]["orgId"]

        res = await client.get(
            f"/api/organisations/{john_org_id}",
            headers={"Authorization": f"Bearer {jane['accessToken']}"},
        )
        assert res.status_code == 403
        assert res.json()["message"] == "User does not have access to this organisation"

    @pytest.mark.asyncio
    async def test_requires_token(self, client):
        res = await client.get("/api/organisations")
        assert res.status_code == 401

        res = await client.get("/api/organisations", headers={"Authorization": "Bearer junk"})
        assert res.status_code == 401
