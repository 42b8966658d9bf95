"""
recipe_api.services.comment_service

Comment CRUD scoped through the parent recipe.

Responsibilities:
- Resolve `(recipe_id, comment_id)` against the recipe's embedded comment list.
- Run every mutation as load recipe -> replace comment list -> persist recipe.
- Populate comment authors from the user directory on listing.

Concurrency:
- Two writers touching the same recipe race; the last commit wins.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.db.models import Recipe, User
from recipe_api.db.repositories.recipes import RecipeRepo
from recipe_api.db.repositories.users import UserRepo
from recipe_api.errors import NotFoundError

# `id` and `author` are fixed at creation.
UPDATABLE_FIELDS = frozenset({"content", "date"})


def _now_iso() -> str:
    return datetime.now(tz=UTC).isoformat()


def _author_record(user: User) -> dict[str, Any]:
    return {"id": user.id, "name": user.name, "email": user.email, "role": user.role}


class CommentService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._recipes = RecipeRepo(session)
        self._users = UserRepo(session)

    async def _load_recipe(self, recipe_id: uuid.UUID) -> Recipe:
        recipe = await self._recipes.get(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe not found")
        return recipe

    @staticmethod
    def _index_of(recipe: Recipe, comment_id: str) -> int:
        for i, comment in enumerate(recipe.comments or []):
            if comment.get("id") == comment_id:
                return i
        raise NotFoundError("Comment not found")

    async def create(
        self, recipe_id: uuid.UUID, body: Mapping[str, Any], author: str
    ) -> dict[str, Any]:
        recipe = await self._load_recipe(recipe_id)
        comment = {
            "id": uuid.uuid4().hex,
            "content": body["content"],
            "date": body.get("date") or _now_iso(),
            "author": author,
        }
        await self._recipes.save(recipe, {"comments": [*(recipe.comments or []), comment]})
        await self._session.commit()
        return comment

    async def list(self, recipe_id: uuid.UUID) -> list[dict[str, Any]]:
        recipe = await self._load_recipe(recipe_id)
        comments = list(recipe.comments or [])
        users = await self._users.get_many(c["author"] for c in comments)
        # Authors missing from the directory stay as their bare id.
        return [
            {**c, "author": _author_record(users[c["author"]])} if c["author"] in users else dict(c)
            for c in comments
        ]

    async def get(self, recipe_id: uuid.UUID, comment_id: str) -> dict[str, Any]:
        recipe = await self._load_recipe(recipe_id)
        return dict(recipe.comments[self._index_of(recipe, comment_id)])

    async def update(
        self, recipe_id: uuid.UUID, comment_id: str, fields: Mapping[str, Any]
    ) -> dict[str, Any]:
        recipe = await self._load_recipe(recipe_id)
        idx = self._index_of(recipe, comment_id)
        changes = {k: v for k, v in fields.items() if k in UPDATABLE_FIELDS}

        comments = list(recipe.comments)
        # Build a new dict: mutating the loaded one would hide the change from the ORM.
        comments[idx] = {**comments[idx], **changes}
        await self._recipes.save(recipe, {"comments": comments})
        await self._session.commit()
        return comments[idx]

    async def delete(self, recipe_id: uuid.UUID, comment_id: str) -> None:
        recipe = await self._load_recipe(recipe_id)
        idx = self._index_of(recipe, comment_id)
        comments = [c for i, c in enumerate(recipe.comments) if i != idx]
        await self._recipes.save(recipe, {"comments": comments})
        await self._session.commit()


# --- Module Notes -----------------------------------------------------------
# Missing recipe and missing comment both raise NotFoundError; only the message differs.
