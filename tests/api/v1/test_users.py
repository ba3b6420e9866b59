import pytest
from httpx import AsyncClient

from app.models import TaxonomyKind
from tests.helpers import auth_headers


@pytest.mark.asyncio
class TestUserProfile:
    async def test_read_profile(self, async_client: AsyncClient, users):
        response = await async_client.get("/api/v1/users/profile", headers=auth_headers(users.owner))
        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "owner"
        assert data["email"] == "owner@example.com"
        assert data["is_admin"] is False
        assert data["dietary_restrictions"] == []

    async def test_read_profile_requires_token(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/users/profile")
        assert response.status_code == 401

    async def test_update_profile_and_restrictions(self, async_client: AsyncClient, users, taxonomy_ids):
        restrictions = taxonomy_ids[TaxonomyKind.DIETARY_RESTRICTION]
        headers = auth_headers(users.owner)
        payload = {
            "username": "chef",
            "email": "chef@example.com",
            "bio": "Cooks a lot.",
            "dietary_restriction_ids": [restrictions["Vegan"], restrictions["Gluten-Free"]],
        }

        response = await async_client.put("/api/v1/users/profile", json=payload, headers=headers)
        assert response.status_code == 200
        data = response.json()
        assert data["username"] == "chef"
        assert data["bio"] == "Cooks a lot."
        assert [r["name"] for r in data["dietary_restrictions"]] == ["Gluten-Free", "Vegan"]

        # omitting the ids keeps the stored preferences
        response = await async_client.put(
            "/api/v1/users/profile", json={"username": "chef", "email": "chef@example.com"}, headers=headers
        )
        assert len(response.json()["dietary_restrictions"]) == 2

        response = await async_client.put(
            "/api/v1/users/profile",
            json={"username": "chef", "email": "chef@example.com", "dietary_restriction_ids": []},
            headers=headers,
        )
        assert response.json()["dietary_restrictions"] == []

    async def test_update_requires_username_and_email(self, async_client: AsyncClient, users):
        response = await async_client.put(
            "/api/v1/users/profile", json={"username": "owner"}, headers=auth_headers(users.owner)
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Username and email are required."

    async def test_update_rejects_taken_username(self, async_client: AsyncClient, users):
        response = await async_client.put(
            "/api/v1/users/profile",
            json={"username": "other", "email": "owner@example.com"},
            headers=auth_headers(users.owner),
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Username already taken."

    async def test_update_rejects_taken_email(self, async_client: AsyncClient, users):
        response = await async_client.put(
            "/api/v1/users/profile",
            json={"username": "owner", "email": "other@example.com"},
            headers=auth_headers(users.owner),
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Email already in use."
