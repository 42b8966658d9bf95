from __future__ import annotations

import uuid
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from recipe_api.errors import NotFoundError
from recipe_api.services.recipe_service import RecipeService


def _soup() -> dict[str, Any]:
    return {
        "title": "Soup",
        "ingredients": [{"name": "Water", "quantity": "1L"}],
        "instructions": "Boil",
        "preparation_time": 10,
    }


@pytest.mark.asyncio
async def test_create_sets_creator_and_empty_comments(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        created = await RecipeService(session=session).create(fields=_soup(), creator="u1")

    async with session_factory() as session:
        recipe = await RecipeService(session=session).get(created.id)

    assert recipe.creator == "u1"
    assert recipe.comments == []
    assert recipe.title == "Soup"
    assert recipe.created_at is not None
    assert recipe.updated_at is not None


@pytest.mark.asyncio
async def test_create_ignores_creator_in_fields(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        recipe = await RecipeService(session=session).create(
            fields={**_soup(), "creator": "mallory"}, creator="u1"
        )
    assert recipe.creator == "u1"


@pytest.mark.asyncio
async def test_get_missing_recipe(session_factory: async_sessionmaker[AsyncSession]) -> None:
    async with session_factory() as session:
        with pytest.raises(NotFoundError, match="Recipe not found"):
            await RecipeService(session=session).get(uuid.uuid4())


@pytest.mark.asyncio
async def test_list_returns_all_and_ignores_filter_and_options(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        svc = RecipeService(session=session)
        a = await svc.create(fields=_soup(), creator="u1")
        b = await svc.create(fields={**_soup(), "title": "Stew"}, creator="u2")

    async with session_factory() as session:
        recipes = await RecipeService(session=session).list(
            filter={"title": "Stew"}, options={"limit": 1, "page": 2}
        )

    assert {r.id for r in recipes} == {a.id, b.id}


@pytest.mark.asyncio
async def test_update_is_a_shallow_merge(session_factory: async_sessionmaker[AsyncSession]) -> None:
    async with session_factory() as session:
        created = await RecipeService(session=session).create(fields=_soup(), creator="u1")

    async with session_factory() as session:
        await RecipeService(session=session).update(created.id, {"title": "X"})

    async with session_factory() as session:
        recipe = await RecipeService(session=session).get(created.id)

    assert recipe.title == "X"
    assert recipe.ingredients == [{"name": "Water", "quantity": "1L"}]
    assert recipe.instructions == "Boil"
    assert recipe.preparation_time == 10
    assert recipe.comments == []
    assert recipe.creator == "u1"


@pytest.mark.asyncio
async def test_update_replaces_lists_wholesale(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        created = await RecipeService(session=session).create(
            fields={
                **_soup(),
                "ingredients": [
                    {"name": "Water", "quantity": "1L"},
                    {"name": "Salt", "quantity": "1 pinch"},
                ],
            },
            creator="u1",
        )

    async with session_factory() as session:
        await RecipeService(session=session).update(
            created.id, {"ingredients": [{"name": "Stock", "quantity": "2L"}]}
        )

    async with session_factory() as session:
        recipe = await RecipeService(session=session).get(created.id)
    assert recipe.ingredients == [{"name": "Stock", "quantity": "2L"}]


@pytest.mark.asyncio
async def test_update_cannot_change_creator_or_comments(
    session_factory: async_sessionmaker[AsyncSession],
) -> None:
    async with session_factory() as session:
        created = await RecipeService(session=session).create(fields=_soup(), creator="u1")
        updated = await RecipeService(session=session).update(
            created.id, {"creator": "mallory", "comments": [{"id": "x"}], "title": "Y"}
        )

    assert updated.creator == "u1"
    assert updated.comments == []
    assert updated.title == "Y"


@pytest.mark.asyncio
async def test_update_missing_recipe(session_factory: async_sessionmaker[AsyncSession]) -> None:
    async with session_factory() as session:
        with pytest.raises(NotFoundError, match="Recipe not found"):
            await RecipeService(session=session).update(uuid.uuid4(), {"title": "X"})


@pytest.mark.asyncio
async def test_delete(session_factory: async_sessionmaker[AsyncSession]) -> None:
    async with session_factory() as session:
        created = await RecipeService(session=session).create(fields=_soup(), creator="u1")

    async with session_factory() as session:
        await RecipeService(session=session).delete(created.id)

    async with session_factory() as session:
        svc = RecipeService(session=session)
        with pytest.raises(NotFoundError):
            await svc.get(created.id)
        with pytest.raises(NotFoundError, match="Recipe not found"):
            await svc.delete(created.id)
