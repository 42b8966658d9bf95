"""
recipe_api.api.routers.comments

Comment endpoints, addressed as `/v1/comments/{recipe_id}[/{comment_id}]`.

Responsibilities:
- Create/list/get/update/delete comments embedded in a recipe.

Note:
- Only creation requires a right; the other comment operations are open
  (see `auth.policy.OPERATION_RIGHTS`).
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from recipe_api.api.deps import db_session
from recipe_api.api.schemas import CommentCreate, CommentOut, CommentUpdate
from recipe_api.auth.deps import authorize
from recipe_api.auth.models import Principal
from recipe_api.auth.policy import Operation
from recipe_api.services.comment_service import CommentService

router = APIRouter(prefix="/v1/comments", tags=["comments"])


@router.post("/{recipe_id}", response_model=CommentOut, status_code=HTTP_201_CREATED)
async def create_comment(
    recipe_id: uuid.UUID,
    body: CommentCreate,
    principal: Principal = Depends(authorize(Operation.comments_create)),
    session: AsyncSession = Depends(db_session),
) -> CommentOut:
    comment = await CommentService(session=session).create(
        recipe_id, body.model_dump(mode="json", exclude_none=True), principal.subject
    )
    return CommentOut.model_validate(comment)


@router.get(
    "/{recipe_id}",
    response_model=list[CommentOut],
    dependencies=[Depends(authorize(Operation.comments_list))],
)
async def list_comments(
    recipe_id: uuid.UUID,
    session: AsyncSession = Depends(db_session),
) -> list[CommentOut]:
    comments = await CommentService(session=session).list(recipe_id)
    return [CommentOut.model_validate(c) for c in comments]


@router.get(
    "/{recipe_id}/{comment_id}",
    response_model=CommentOut,
    dependencies=[Depends(authorize(Operation.comments_get))],
)
async def get_comment(
    recipe_id: uuid.UUID,
    comment_id: str,
    session: AsyncSession = Depends(db_session),
) -> CommentOut:
    comment = await CommentService(session=session).get(recipe_id, comment_id)
    return CommentOut.model_validate(comment)


@router.patch(
    "/{recipe_id}/{comment_id}",
    response_model=CommentOut,
    dependencies=[Depends(authorize(Operation.comments_update))],
)
async def update_comment(
    recipe_id: uuid.UUID,
    comment_id: str,
    body: CommentUpdate,
    session: AsyncSession = Depends(db_session),
) -> CommentOut:
    fields = body.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    comment = await CommentService(session=session).update(recipe_id, comment_id, fields)
    return CommentOut.model_validate(comment)


@router.delete(
    "/{recipe_id}/{comment_id}",
    status_code=HTTP_204_NO_CONTENT,
    dependencies=[Depends(authorize(Operation.comments_delete))],
)
async def delete_comment(
    recipe_id: uuid.UUID,
    comment_id: str,
    session: AsyncSession = Depends(db_session),
) -> Response:
    await CommentService(session=session).delete(recipe_id, comment_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
