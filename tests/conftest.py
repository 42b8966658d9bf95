"""
tests.conftest

Shared fixtures: per-test SQLite file, app with lifespan entered, httpx client,
and a bearer-token helper.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from recipe_api.api.app import create_app
from recipe_api.auth.deps import jwt_config
from recipe_api.auth.jwt import issue_token
from recipe_api.db.init_db import init_db
from recipe_api.db.session import create_engine, create_sessionmaker
from recipe_api.settings import Settings


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'recipes.db'}")


@pytest_asyncio.fixture
async def session_factory(settings: Settings) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield create_sessionmaker(engine)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run lifespan; enter it explicitly.
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def auth_headers(settings: Settings) -> Callable[[str, str], dict[str, str]]:
    def _headers(subject: str, role: str) -> dict[str, str]:
        token = issue_token(cfg=jwt_config(settings), subject=subject, role=role)
        return {"Authorization": f"Bearer {token}"}

    return _headers
