from decimal import Decimal

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from app.models import Ingredient, Recipe, TaxonomyKind
from tests.helpers import auth_headers, recipe_payload


@pytest.mark.asyncio
class TestRecipeOperations:
    @pytest.fixture
    async def existing_recipe(self, async_client: AsyncClient, users):
        response = await async_client.post(
            "/api/v1/recipes/", json=recipe_payload(), headers=auth_headers(users.admin)
        )
        assert response.status_code == 201
        return response.json()

    @pytest.mark.smoke
    async def test_create_recipe(self, async_client: AsyncClient, users):
        response = await async_client.post(
            "/api/v1/recipes/",
            json=recipe_payload("New Created Recipe"),
            headers=auth_headers(users.admin),
        )
        assert response.status_code == 201
        data = response.json()
        assert data["title"] == "New Created Recipe"
        assert data["owner"] == users.admin.id
        assert data["recipeId"] is not None

    async def test_create_requires_token(self, async_client: AsyncClient):
        response = await async_client.post("/api/v1/recipes/", json=recipe_payload())
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authorized, no token."

    async def test_create_rejects_bad_token(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/recipes/", json=recipe_payload(), headers={"Authorization": "Bearer nope"}
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authorized, token failed."

    async def test_create_requires_admin(self, async_client: AsyncClient, users):
        response = await async_client.post(
            "/api/v1/recipes/", json=recipe_payload(), headers=auth_headers(users.owner)
        )
        assert response.status_code == 403

    async def test_create_missing_fields(self, async_client: AsyncClient, users):
        response = await async_client.post(
            "/api/v1/recipes/",
            json=recipe_payload(title="", ingredients=[]),
            headers=auth_headers(users.admin),
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Title, instructions, and ingredients are required."

    async def test_create_malformed_body(self, async_client: AsyncClient, users):
        response = await async_client.post(
            "/api/v1/recipes/",
            json=recipe_payload(servings="many"),
            headers=auth_headers(users.admin),
        )
        assert response.status_code == 400
        assert response.json()["errors"]

    async def test_create_with_unknown_taxonomy_id(self, async_client: AsyncClient, users, db_session):
        response = await async_client.post(
            "/api/v1/recipes/",
            json=recipe_payload(
                ingredients=[{"name": "Unobtainium", "quantity": 1, "unit": "g"}],
                category_ids=[999999],
            ),
            headers=auth_headers(users.admin),
        )
        assert response.status_code == 500

        assert await db_session.scalar(select(func.count()).select_from(Recipe)) == 0
        assert await db_session.scalar(select(func.count()).select_from(Ingredient)) == 0

    @pytest.mark.smoke
    async def test_get_recipes_list(self, async_client: AsyncClient, existing_recipe):
        response = await async_client.get("/api/v1/recipes/")
        assert response.status_code == 200
        data = response.json()
        assert data["currentPage"] == 1
        assert data["totalItems"] == 1
        assert data["totalPages"] == 1
        assert data["hasMore"] is False
        assert [r["id"] for r in data["recipes"]] == [existing_recipe["recipeId"]]
        assert data["recipes"][0]["username"] == "admin"

    async def test_list_filters_by_query_params(self, async_client: AsyncClient, users, taxonomy_ids):
        vegan = taxonomy_ids[TaxonomyKind.DIETARY_RESTRICTION]["Vegan"]
        easy = taxonomy_ids[TaxonomyKind.DIFFICULTY_LEVEL]["Easy"]
        headers = auth_headers(users.admin)
        matching = await async_client.post(
            "/api/v1/recipes/",
            json=recipe_payload("Vegan Bowl", dietary_restriction_ids=[vegan], difficulty_level_ids=[easy]),
            headers=headers,
        )
        await async_client.post(
            "/api/v1/recipes/", json=recipe_payload("Vegan Only", dietary_restriction_ids=[vegan]), headers=headers
        )

        response = await async_client.get(
            "/api/v1/recipes/",
            params={"dietaryRestrictions": f"{vegan},abc,-3", "difficultyLevels": str(easy)},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["totalItems"] == 1
        assert data["recipes"][0]["id"] == matching.json()["recipeId"]

    async def test_list_pagination(self, async_client: AsyncClient, users):
        headers = auth_headers(users.admin)
        for i in range(3):
            await async_client.post("/api/v1/recipes/", json=recipe_payload(f"Recipe {i}"), headers=headers)

        response = await async_client.get("/api/v1/recipes/", params={"page": 2, "limit": 2})
        data = response.json()
        assert data["perPage"] == 2
        assert data["totalItems"] == 3
        assert data["totalPages"] == 2
        assert len(data["recipes"]) == 1
        assert data["recipes"][0]["title"] == "Recipe 0"

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"page": "two"}])
    async def test_list_rejects_bad_paging(self, async_client: AsyncClient, params):
        response = await async_client.get("/api/v1/recipes/", params=params)
        assert response.status_code == 400

    @pytest.mark.smoke
    async def test_get_recipe_by_id(self, async_client: AsyncClient, existing_recipe):
        recipe_id = existing_recipe["recipeId"]
        response = await async_client.get(f"/api/v1/recipes/{recipe_id}")
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == existing_recipe["title"]
        assert data["ingredients"][0]["name"] == "rice"
        assert Decimal(str(data["ingredients"][0]["quantity"])) == Decimal("2")
        assert data["average_rating"] == 0
        assert data["is_favorited"] is False

    async def test_get_recipe_not_found(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/recipes/999999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Recipe not found."

    async def test_get_recipe_ignores_bad_token(self, async_client: AsyncClient, existing_recipe):
        response = await async_client.get(
            f"/api/v1/recipes/{existing_recipe['recipeId']}", headers={"Authorization": "Bearer nope"}
        )
        assert response.status_code == 200

    async def test_update_recipe_by_owner(self, async_client: AsyncClient, users, make_recipe):
        recipe_id = await make_recipe(users.owner, "Original")
        update_payload = recipe_payload(
            "Updated Title",
            ingredients=[{"name": "Couscous", "quantity": 1, "unit": "cup"}],
        )

        response = await async_client.put(
            f"/api/v1/recipes/{recipe_id}", json=update_payload, headers=auth_headers(users.owner)
        )
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Updated Title"
        assert [i["name"] for i in data["ingredients"]] == ["couscous"]

    async def test_update_recipe_by_admin(self, async_client: AsyncClient, users, make_recipe):
        recipe_id = await make_recipe(users.owner, "Original")

        response = await async_client.put(
            f"/api/v1/recipes/{recipe_id}", json=recipe_payload("Moderated"), headers=auth_headers(users.admin)
        )
        assert response.status_code == 200
        assert response.json()["user_id"] == users.owner.id

    async def test_update_recipe_forbidden(self, async_client: AsyncClient, users, make_recipe):
        recipe_id = await make_recipe(users.owner, "Original")

        response = await async_client.put(
            f"/api/v1/recipes/{recipe_id}", json=recipe_payload("Hijacked"), headers=auth_headers(users.other)
        )
        assert response.status_code == 403
        assert response.json()["detail"] == "Not authorized to update this recipe."

    async def test_update_recipe_not_found(self, async_client: AsyncClient, users):
        response = await async_client.put(
            "/api/v1/recipes/999999", json=recipe_payload("Ghost Recipe"), headers=auth_headers(users.admin)
        )
        assert response.status_code == 404

    async def test_delete_recipe(self, async_client: AsyncClient, users, existing_recipe):
        recipe_id = existing_recipe["recipeId"]
        response = await async_client.delete(f"/api/v1/recipes/{recipe_id}", headers=auth_headers(users.admin))
        assert response.status_code == 200
        assert response.json() == {"detail": "Recipe deleted successfully."}

        get_response = await async_client.get(f"/api/v1/recipes/{recipe_id}")
        assert get_response.status_code == 404

    async def test_delete_recipe_forbidden(self, async_client: AsyncClient, users, make_recipe):
        recipe_id = await make_recipe(users.owner)

        response = await async_client.delete(f"/api/v1/recipes/{recipe_id}", headers=auth_headers(users.other))
        assert response.status_code == 403

    async def test_delete_recipe_not_found(self, async_client: AsyncClient, users):
        response = await async_client.delete("/api/v1/recipes/999999", headers=auth_headers(users.admin))
        assert response.status_code == 404


@pytest.mark.asyncio
class TestRecipeEngagement:
    async def test_rate_then_rerate(self, async_client: AsyncClient, users, make_recipe):
        recipe_id = await make_recipe(users.admin)
        headers = auth_headers(users.owner)

        first = await async_client.post(f"/api/v1/recipes/{recipe_id}/rate", json={"rating": 2}, headers=headers)
        assert first.status_code == 201
        assert first.json() == {"status": "created", "rating": 2}

        second = await async_client.post(f"/api/v1/recipes/{recipe_id}/rate", json={"rating": 5}, headers=headers)
        assert second.status_code == 200
        assert second.json() == {"status": "updated", "rating": 5}

        detail = (await async_client.get(f"/api/v1/recipes/{recipe_id}", headers=headers)).json()
        assert detail["total_ratings"] == 1
        assert detail["average_rating"] == 5
        assert detail["current_user_rating"] == 5

    @pytest.mark.parametrize("body", [{"rating": 6}, {"rating": 0}, {}, {"rating": 4.5}])
    async def test_rate_rejects_invalid_values(self, async_client: AsyncClient, users, make_recipe, body):
        recipe_id = await make_recipe(users.admin)

        response = await async_client.post(
            f"/api/v1/recipes/{recipe_id}/rate", json=body, headers=auth_headers(users.owner)
        )
        assert response.status_code == 400

    @pytest.mark.parametrize("raw, stored", [(4.0, 4), ("5", 5)])
    async def test_rate_coerces_whole_numbers(self, async_client: AsyncClient, users, make_recipe, raw, stored):
        recipe_id = await make_recipe(users.admin)

        response = await async_client.post(
            f"/api/v1/recipes/{recipe_id}/rate", json={"rating": raw}, headers=auth_headers(users.owner)
        )
        assert response.status_code == 201
        assert response.json() == {"status": "created", "rating": stored}

    async def test_rate_requires_token(self, async_client: AsyncClient, users, make_recipe):
        recipe_id = await make_recipe(users.admin)

        response = await async_client.post(f"/api/v1/recipes/{recipe_id}/rate", json={"rating": 3})
        assert response.status_code == 401

    async def test_rate_missing_recipe(self, async_client: AsyncClient, users):
        response = await async_client.post(
            "/api/v1/recipes/999999/rate", json={"rating": 3}, headers=auth_headers(users.owner)
        )
        assert response.status_code == 404

    async def test_favorite_toggles(self, async_client: AsyncClient, users, make_recipe):
        recipe_id = await make_recipe(users.admin, "Loved")
        headers = auth_headers(users.owner)

        on = await async_client.post(f"/api/v1/recipes/{recipe_id}/favorite", headers=headers)
        assert on.status_code == 201
        assert on.json() == {"favorited": True}

        favorites = await async_client.get("/api/v1/recipes/my-favorites", headers=headers)
        assert [r["title"] for r in favorites.json()] == ["Loved"]

        off = await async_client.post(f"/api/v1/recipes/{recipe_id}/favorite", headers=headers)
        assert off.status_code == 200
        assert off.json() == {"favorited": False}

        favorites = await async_client.get("/api/v1/recipes/my-favorites", headers=headers)
        assert favorites.json() == []

    async def test_favorite_missing_recipe(self, async_client: AsyncClient, users):
        response = await async_client.post("/api/v1/recipes/999999/favorite", headers=auth_headers(users.owner))
        assert response.status_code == 404

    async def test_my_favorites_requires_token(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/recipes/my-favorites")
        assert response.status_code == 401
