from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED

from recipe_api.api.deps import db_session
from recipe_api.api.schemas import UserCreate, UserOut
from recipe_api.auth.deps import authorize
from recipe_api.auth.policy import Operation
from recipe_api.services.user_service import UserService

router = APIRouter(prefix="/v1/users", tags=["users"])


@router.post(
    "",
    response_model=UserOut,
    status_code=HTTP_201_CREATED,
    dependencies=[Depends(authorize(Operation.users_create))],
)
async def create_user(
    body: UserCreate,
    session: AsyncSession = Depends(db_session),
) -> UserOut:
    user = await UserService(session=session).create(
        user_id=body.id, name=body.name, email=body.email, role=body.role
    )
    return UserOut.model_validate(user)


@router.get(
    "",
    response_model=list[UserOut],
    dependencies=[Depends(authorize(Operation.users_list))],
)
async def list_users(session: AsyncSession = Depends(db_session)) -> list[UserOut]:
    return [UserOut.model_validate(u) for u in await UserService(session=session).list()]


@router.get(
    "/{user_id}",
    response_model=UserOut,
    dependencies=[Depends(authorize(Operation.users_get))],
)
async def get_user(user_id: str, session: AsyncSession = Depends(db_session)) -> UserOut:
    return UserOut.model_validate(await UserService(session=session).get(user_id))
