import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
import httpx
from types import SimpleNamespace
from httpx import ASGITransport
from typing import AsyncGenerator

from sqlalchemy import select
from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession

from app.db.seed import seed_taxonomies
from app.db.session import enable_sqlite_foreign_keys
from app.models import Base, TaxonomyKind, User
from app.schemas import RecipeCreate
from app.services import recipe_service
from tests.helpers import recipe_payload
from tests.test_config import test_settings


@pytest.fixture
async def db_engine():
    engine = create_async_engine(
        test_settings.TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_sessionmaker(bind=engine, expire_on_commit=False)() as session:
        await seed_taxonomies(session)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
async def users(session_factory):
    async with session_factory() as session:
        admin = User(username="admin", email="admin@example.com", password_hash="x", is_admin=True)
        owner = User(username="owner", email="owner@example.com", password_hash="x", is_admin=False)
        other = User(username="other", email="other@example.com", password_hash="x", is_admin=False)
        session.add_all([admin, owner, other])
        await session.commit()
        return SimpleNamespace(admin=admin, owner=owner, other=other)


@pytest.fixture
async def taxonomy_ids(session_factory) -> dict[TaxonomyKind, dict[str, int]]:
    """
    kind -> {name: id} for the seeded vocabularies
    """
    ids = {}
    async with session_factory() as session:
        for kind in TaxonomyKind:
            rows = (await session.execute(select(kind.model.id, kind.model.name))).all()
            ids[kind] = {name: id_ for id_, name in rows}
    return ids


@pytest.fixture
def make_recipe(session_factory):
    async def _make_recipe(owner: User, title: str = "Standard Recipe", **overrides) -> int:
        recipe_in = RecipeCreate(**recipe_payload(title, **overrides))
        async with session_factory() as session:
            recipe = await recipe_service.create_recipe(session, owner_id=owner.id, recipe_in=recipe_in)
            return recipe.id

    return _make_recipe


@pytest.fixture
async def async_client(session_factory):
    from app.main import app
    from app.db.session import get_db

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
