"""
recipe_api.api.schemas

Request/response models for the HTTP surface.

Wire keys are camelCase (`preparationTime`, `createdAt`); requests also accept
the snake_case field names.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from recipe_api.auth.roles import DEFAULT_ROLE, ROLES


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


class Ingredient(ApiModel):
    name: str = Field(min_length=1, max_length=256)
    quantity: str = Field(min_length=1, max_length=128)


class RecipeCreate(ApiModel):
    title: str = Field(min_length=1, max_length=256)
    ingredients: list[Ingredient] = Field(default_factory=list)
    instructions: str = Field(min_length=1)
    preparation_time: int = Field(ge=0)


class RecipeUpdate(ApiModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1, max_length=256)
    ingredients: list[Ingredient] | None = None
    instructions: str | None = Field(default=None, min_length=1)
    preparation_time: int | None = Field(default=None, ge=0)


class AuthorOut(ApiModel):
    id: str
    name: str
    email: str
    role: str


class CommentCreate(ApiModel):
    model_config = ConfigDict(extra="forbid")

    content: str = Field(min_length=1)
    date: datetime | None = None


class CommentUpdate(ApiModel):
    model_config = ConfigDict(extra="forbid")

    content: str | None = Field(default=None, min_length=1)
    date: datetime | None = None


class CommentOut(ApiModel):
    id: str
    content: str
    date: datetime
    # Listing populates the author record; other reads return the bare id.
    author: AuthorOut | str


class RecipeOut(ApiModel):
    id: uuid.UUID
    title: str
    ingredients: list[Ingredient]
    instructions: str
    preparation_time: int
    creator: str
    comments: list[CommentOut]
    created_at: datetime
    updated_at: datetime


class UserCreate(ApiModel):
    id: str = Field(min_length=1, max_length=256)
    name: str = Field(min_length=1, max_length=256)
    email: str = Field(min_length=3, max_length=320)
    role: str = DEFAULT_ROLE

    @field_validator("role")
    @classmethod
    def _known_role(cls, v: str) -> str:
        if v not in ROLES:
            raise ValueError(f"role must be one of {', '.join(ROLES)}")
        return v


class UserOut(ApiModel):
    id: str
    name: str
    email: str
    role: str
    created_at: datetime
