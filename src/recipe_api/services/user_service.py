from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from recipe_api.auth.roles import rights_for
from recipe_api.db.models import User
from recipe_api.db.repositories.users import UserRepo
from recipe_api.errors import ConflictError, NotFoundError


class UserService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._users = UserRepo(session)

    async def create(self, *, user_id: str, name: str, email: str, role: str) -> User:
        # Rejects unknown roles with UnknownRoleError before touching the store.
        rights_for(role)
        if await self._users.get(user_id) is not None:
            raise ConflictError("User already exists")
        user = await self._users.create(user_id=user_id, name=name, email=email, role=role)
        await self._session.commit()
        return user

    async def get(self, user_id: str) -> User:
        user = await self._users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def list(self) -> list[User]:
        return await self._users.list_all()
