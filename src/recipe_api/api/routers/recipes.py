"""
recipe_api.api.routers.recipes

Recipe endpoints.

Responsibilities:
- Create/list/get/update/delete recipes.
- Declare the operation each endpoint performs; rights come from `auth.policy`.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from recipe_api.api.deps import db_session
from recipe_api.api.schemas import RecipeCreate, RecipeOut, RecipeUpdate
from recipe_api.auth.deps import authorize
from recipe_api.auth.models import Principal
from recipe_api.auth.policy import Operation
from recipe_api.services.recipe_service import RecipeService

router = APIRouter(prefix="/v1/recipes", tags=["recipes"])


@router.post("", response_model=RecipeOut, status_code=HTTP_201_CREATED)
async def create_recipe(
    body: RecipeCreate,
    principal: Principal = Depends(authorize(Operation.recipes_create)),
    session: AsyncSession = Depends(db_session),
) -> RecipeOut:
    recipe = await RecipeService(session=session).create(
        fields=body.model_dump(), creator=principal.subject
    )
    return RecipeOut.model_validate(recipe)


@router.get(
    "",
    response_model=list[RecipeOut],
    dependencies=[Depends(authorize(Operation.recipes_list))],
)
async def list_recipes(
    title: str | None = None,
    creator: str | None = None,
    sort_by: str | None = Query(default=None, alias="sortBy"),
    limit: int | None = Query(default=None, ge=1),
    page: int | None = Query(default=None, ge=1),
    session: AsyncSession = Depends(db_session),
) -> list[RecipeOut]:
    query_filter = {k: v for k, v in {"title": title, "creator": creator}.items() if v is not None}
    options = {
        k: v for k, v in {"sortBy": sort_by, "limit": limit, "page": page}.items() if v is not None
    }
    recipes = await RecipeService(session=session).list(filter=query_filter, options=options)
    return [RecipeOut.model_validate(r) for r in recipes]


@router.get(
    "/{recipe_id}",
    response_model=RecipeOut,
    dependencies=[Depends(authorize(Operation.recipes_get))],
)
async def get_recipe(
    recipe_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
) -> RecipeOut:
    recipe = await RecipeService(session=session).get(recipe_id)
    return RecipeOut.model_validate(recipe)


@router.patch(
    "/{recipe_id}",
    response_model=RecipeOut,
    dependencies=[Depends(authorize(Operation.recipes_update))],
)
async def update_recipe(
    recipe_id: uuid.UUID,
    body: RecipeUpdate,
    session: AsyncSession = Depends(db_session),
) -> RecipeOut:
    fields = body.model_dump(exclude_unset=True, exclude_none=True)
    recipe = await RecipeService(session=session).update(recipe_id, fields)
    return RecipeOut.model_validate(recipe)


@router.delete(
    "/{recipe_id}",
    status_code=HTTP_204_NO_CONTENT,
    dependencies=[Depends(authorize(Operation.recipes_delete))],
)
async def delete_recipe(
    recipe_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
) -> Response:
    await RecipeService(session=session).delete(recipe_id)
    return Response(status_code=HTTP_204_NO_CONTENT)


# --- Module Notes -----------------------------------------------------------
# List query parameters are parsed and forwarded but not applied (see RecipeService.list).
