"""
recipe_api.services.recipe_service

Recipe CRUD over the recipe aggregate store.

Responsibilities:
- Create recipes owned by the calling principal.
- Enforce existence before update/delete.
- Apply shallow merges for partial updates.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.db.models import Recipe
from recipe_api.db.repositories.recipes import RecipeRepo
from recipe_api.errors import NotFoundError

# `creator` and `comments` are not writable through update.
UPDATABLE_FIELDS = frozenset({"title", "ingredients", "instructions", "preparation_time"})


class RecipeService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._recipes = RecipeRepo(session)

    async def create(self, *, fields: Mapping[str, Any], creator: str) -> Recipe:
        recipe = await self._recipes.create(
            title=fields["title"],
            ingredients=list(fields.get("ingredients", [])),
            instructions=fields["instructions"],
            preparation_time=fields["preparation_time"],
            creator=creator,
        )
        await self._session.commit()
        return recipe

    async def get(self, recipe_id: uuid.UUID) -> Recipe:
        recipe = await self._recipes.get(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe

    async def list(
        self,
        *,
        filter: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> list[Recipe]:
        """
        Return every recipe, oldest first.

        `filter` (title, creator) and `options` (sortBy, limit, page) are
        accepted for API compatibility and are not applied.
        """

        return await self._recipes.list_all()

    async def update(self, recipe_id: uuid.UUID, fields: Mapping[str, Any]) -> Recipe:
        recipe = await self.get(recipe_id)
        changes = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}
        await self._recipes.save(recipe, changes)
        await self._session.commit()
        return recipe

    async def delete(self, recipe_id: uuid.UUID) -> None:
        # Embedded comments go with the row.
        recipe = await self.get(recipe_id)
        await self._recipes.delete(recipe)
        await self._session.commit()
