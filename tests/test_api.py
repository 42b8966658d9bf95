"""
tests.test_api

HTTP-level tests: status codes, authentication/authorization wiring and the
recipe -> comment -> delete flow.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable

import httpx
import pytest

Headers = Callable[[str, str], dict[str, str]]

SOUP = {
    "title": "Soup",
    "ingredients": [{"name": "Water", "quantity": "1L"}],
    "instructions": "Boil",
    "preparationTime": 10,
}


@pytest.mark.asyncio
async def test_end_to_end_recipe_comment_flow(
    client: httpx.AsyncClient, auth_headers: Headers
) -> None:
    r = await client.post("/v1/recipes", json=SOUP, headers=auth_headers("u1", "admin"))
    assert r.status_code == 201
    recipe = r.json()
    recipe_id = recipe["id"]
    assert recipe["creator"] == "u1"
    assert recipe["comments"] == []
    assert recipe["preparationTime"] == 10
    assert "createdAt" in recipe and "updatedAt" in recipe

    r = await client.post(
        f"/v1/comments/{recipe_id}",
        json={"content": "Tasty"},
        headers=auth_headers("u2", "admin"),
    )
    assert r.status_code == 201
    comment = r.json()
    assert comment["author"] == "u2"
    assert comment["content"] == "Tasty"

    r = await client.get(f"/v1/comments/{recipe_id}")
    assert r.status_code == 200
    comments = r.json()
    assert len(comments) == 1
    assert comments[0]["id"] == comment["id"]

    r = await client.delete(f"/v1/recipes/{recipe_id}", headers=auth_headers("u1", "admin"))
    assert r.status_code == 204
    assert r.content == b""

    r = await client.get(f"/v1/recipes/{recipe_id}", headers=auth_headers("u1", "admin"))
    assert r.status_code == 404
    assert r.json() == {"detail": "Recipe not found", "code": "NOT_FOUND"}


@pytest.mark.asyncio
async def test_recipe_routes_require_a_token(client: httpx.AsyncClient) -> None:
    assert (await client.get("/v1/recipes")).status_code == 401
    assert (await client.post("/v1/recipes", json=SOUP)).status_code == 401


@pytest.mark.asyncio
async def test_invalid_tokens_are_unauthenticated(
    client: httpx.AsyncClient, auth_headers: Headers
) -> None:
    r = await client.get("/v1/recipes", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401

    r = await client.get("/v1/recipes", headers=auth_headers("u1", "superuser"))
    assert r.status_code == 401
    assert r.json()["detail"] == "Invalid token role"


@pytest.mark.asyncio
async def test_user_role_is_forbidden_on_recipe_routes(
    client: httpx.AsyncClient, auth_headers: Headers
) -> None:
    user = auth_headers("u1", "user")
    r = await client.post("/v1/recipes", json=SOUP, headers=user)
    assert r.status_code == 403
    assert r.json()["code"] == "FORBIDDEN"
    assert (await client.get("/v1/recipes", headers=user)).status_code == 403
    assert (await client.get(f"/v1/recipes/{uuid.uuid4()}", headers=user)).status_code == 403


@pytest.mark.asyncio
async def test_patch_recipe_updates_only_supplied_fields(
    client: httpx.AsyncClient, auth_headers: Headers
) -> None:
    admin = auth_headers("u1", "admin")
    recipe_id = (await client.post("/v1/recipes", json=SOUP, headers=admin)).json()["id"]

    r = await client.patch(f"/v1/recipes/{recipe_id}", json={"title": "X"}, headers=admin)
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "X"
    assert body["ingredients"] == SOUP["ingredients"]
    assert body["instructions"] == "Boil"
    assert body["preparationTime"] == 10

    r = await client.patch(f"/v1/recipes/{recipe_id}", json={"creator": "x"}, headers=admin)
    assert r.status_code == 422

    r = await client.patch(f"/v1/recipes/{uuid.uuid4()}", json={"title": "X"}, headers=admin)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_list_recipes_accepts_documented_query_parameters(
    client: httpx.AsyncClient, auth_headers: Headers
) -> None:
    admin = auth_headers("u1", "admin")
    await client.post("/v1/recipes", json=SOUP, headers=admin)
    await client.post("/v1/recipes", json={**SOUP, "title": "Stew"}, headers=admin)

    r = await client.get(
        "/v1/recipes",
        params={"title": "Stew", "sortBy": "title:asc", "limit": 1, "page": 1},
        headers=admin,
    )
    assert r.status_code == 200
    assert {rec["title"] for rec in r.json()} == {"Soup", "Stew"}


@pytest.mark.asyncio
async def test_comment_creation_requires_manage_recipes(
    client: httpx.AsyncClient, auth_headers: Headers
) -> None:
    admin = auth_headers("u1", "admin")
    recipe_id = (await client.post("/v1/recipes", json=SOUP, headers=admin)).json()["id"]

    r = await client.post(f"/v1/comments/{recipe_id}", json={"content": "hi"})
    assert r.status_code == 401

    r = await client.post(
        f"/v1/comments/{recipe_id}", json={"content": "hi"}, headers=auth_headers("u2", "user")
    )
    assert r.status_code == 403


@pytest.mark.asyncio
async def test_comment_get_update_delete_are_open(
    client: httpx.AsyncClient, auth_headers: Headers
) -> None:
    admin = auth_headers("u1", "admin")
    recipe_id = (await client.post("/v1/recipes", json=SOUP, headers=admin)).json()["id"]
    comment_id = (
        await client.post(f"/v1/comments/{recipe_id}", json={"content": "hi"}, headers=admin)
    ).json()["id"]

    r = await client.get(f"/v1/comments/{recipe_id}/{comment_id}")
    assert r.status_code == 200
    assert r.json()["content"] == "hi"

    r = await client.patch(f"/v1/comments/{recipe_id}/{comment_id}", json={"content": "edited"})
    assert r.status_code == 200
    assert r.json()["content"] == "edited"
    assert r.json()["author"] == "u1"

    r = await client.patch(f"/v1/comments/{recipe_id}/{comment_id}", json={"author": "x"})
    assert r.status_code == 422

    r = await client.delete(f"/v1/comments/{recipe_id}/{comment_id}")
    assert r.status_code == 204

    r = await client.delete(f"/v1/comments/{recipe_id}/{comment_id}")
    assert r.status_code == 404
    assert r.json()["detail"] == "Comment not found"

    r = await client.delete(f"/v1/comments/{uuid.uuid4()}/{comment_id}")
    assert r.status_code == 404
    assert r.json()["detail"] == "Recipe not found"


@pytest.mark.asyncio
async def test_comment_list_populates_registered_authors(
    client: httpx.AsyncClient, auth_headers: Headers
) -> None:
    admin = auth_headers("a1", "admin")
    r = await client.post(
        "/v1/users",
        json={"id": "a1", "name": "Ada", "email": "ada@example.com", "role": "admin"},
        headers=admin,
    )
    assert r.status_code == 201

    recipe_id = (await client.post("/v1/recipes", json=SOUP, headers=admin)).json()["id"]
    await client.post(f"/v1/comments/{recipe_id}", json={"content": "one"}, headers=admin)
    await client.post(
        f"/v1/comments/{recipe_id}", json={"content": "two"}, headers=auth_headers("b2", "admin")
    )

    r = await client.get(f"/v1/comments/{recipe_id}")
    assert r.status_code == 200
    first, second = r.json()
    assert first["content"] == "one"
    assert first["author"]["name"] == "Ada"
    assert second["author"] == "b2"


@pytest.mark.asyncio
async def test_user_directory(client: httpx.AsyncClient, auth_headers: Headers) -> None:
    admin = auth_headers("a1", "admin")
    user = {"id": "u9", "name": "Bo", "email": "bo@example.com"}

    r = await client.post("/v1/users", json=user, headers=auth_headers("u1", "user"))
    assert r.status_code == 403

    r = await client.post("/v1/users", json=user, headers=admin)
    assert r.status_code == 201
    assert r.json()["role"] == "user"

    r = await client.post("/v1/users", json=user, headers=admin)
    assert r.status_code == 409

    r = await client.post("/v1/users", json={**user, "id": "u10", "role": "root"}, headers=admin)
    assert r.status_code == 422

    r = await client.get("/v1/users/u9", headers=admin)
    assert r.status_code == 200
    assert r.json()["email"] == "bo@example.com"

    assert (await client.get("/v1/users/nobody", headers=admin)).status_code == 404
    assert [u["id"] for u in (await client.get("/v1/users", headers=admin)).json()] == ["u9"]


@pytest.mark.asyncio
async def test_dev_token_roundtrip(client: httpx.AsyncClient) -> None:
    r = await client.post("/v1/dev/token", json={"subject": "chef", "role": "admin"})
    assert r.status_code == 200
    token = r.json()["access_token"]

    r = await client.post(
        "/v1/recipes", json=SOUP, headers={"Authorization": f"Bearer {token}"}
    )
    assert r.status_code == 201
    assert r.json()["creator"] == "chef"
