"""
recipe_api.db.models

Persistence schema for the recipe service.

Responsibilities:
- Define ORM models:
  - Recipe: aggregate root; its comments are embedded as a JSON list
  - User: directory entry used to populate comment authors
"""

from __future__ import annotations

import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, String, Text, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from recipe_api.db.base import Base


def _utcnow() -> datetime:
    # Naive UTC timestamps, matching what SQLite hands back.
    return datetime.now(tz=UTC).replace(tzinfo=None)


class Recipe(Base):
    __tablename__ = "recipes"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )

    title: Mapped[str] = mapped_column(String(256), nullable=False)
    # [{"name": ..., "quantity": ...}, ...] in recipe order.
    ingredients: Mapped[list[dict[str, str]]] = mapped_column(JSON, nullable=False, default=list)
    instructions: Mapped[str] = mapped_column(Text, nullable=False)
    preparation_time: Mapped[int] = mapped_column(nullable=False)

    creator: Mapped[str] = mapped_column(String(256), nullable=False, index=True)

    # Embedded comments: [{"id", "content", "date", "author"}, ...] in insertion order.
    # Always reassign a new list; in-place mutation is not change-tracked.
    comments: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)


class User(Base):
    __tablename__ = "users"

    # Same value as the JWT `sub` claim.
    id: Mapped[str] = mapped_column(String(256), primary_key=True)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    role: Mapped[str] = mapped_column(String(32), nullable=False)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)


# --- Module Notes -----------------------------------------------------------
# No comments table exists: a comment is only reachable through its recipe row.
