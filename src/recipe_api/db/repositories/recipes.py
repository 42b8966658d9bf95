"""
recipe_api.db.repositories.recipes

Repository for `Recipe` documents.

Responsibilities:
- Insert, fetch, list, save and remove recipe rows (embedded comments included).
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.db.models import Recipe


class RecipeRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(
        self,
        *,
        title: str,
        ingredients: list[dict[str, str]],
        instructions: str,
        preparation_time: int,
        creator: str,
    ) -> Recipe:
        recipe = Recipe(
            title=title,
            ingredients=ingredients,
            instructions=instructions,
            preparation_time=preparation_time,
            creator=creator,
            comments=[],
        )
        self._session.add(recipe)
        await self._session.flush()
        return recipe

    async def get(self, recipe_id: uuid.UUID) -> Recipe | None:
        return await self._session.get(Recipe, recipe_id)

    async def list_all(self) -> list[Recipe]:
        stmt = select(Recipe).order_by(Recipe.created_at)
        return list((await self._session.execute(stmt)).scalars().all())

    async def save(self, recipe: Recipe, fields: dict[str, Any]) -> Recipe:
        # Top-level assignment only; list values replace the stored list wholesale.
        for name, value in fields.items():
            setattr(recipe, name, value)
        await self._session.flush()
        return recipe

    async def delete(self, recipe: Recipe) -> None:
        await self._session.delete(recipe)
        await self._session.flush()
