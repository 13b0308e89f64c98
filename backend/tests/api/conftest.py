"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched for code paths that bypass get_db (readiness probe)
    - The codec is the one wired onto app.state from test settings

Design Decisions:
    - StaticPool: one shared connection so the seeding session and the
      request sessions see the same in-memory database
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import bizcard.infrastructure.database as db_module
from bizcard.db.base import Base
from bizcard.infrastructure.database import DatabaseSessionManager, get_db
from bizcard.main import app
from bizcard.models import City, Country, State, User
from tests.api.seed_data import SEEDED_TOKEN, SEEDED_USER_ID


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def codec():
    return app.state.id_codec


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_user(test_db):
    """Account row with numeric id 42 and token abc123."""
    user = User(
        user_id=SEEDED_USER_ID, mobile="+15550100042", unique_token=SEEDED_TOKEN,
        full_name="Ada Lovelace", company_name="Analytical Engines",
        designation="Founder", email="ada@example.com",
        fcm_token="fcm-device-token", status=1,
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def seed_places(test_db):
    """Two countries, states under the first, cities under the first state."""
    india = Country(id=1, name="India")
    uae = Country(id=2, name="United Arab Emirates")
    retired = Country(id=3, name="Retired", deleted=1)
    test_db.add_all([india, uae, retired])
    await test_db.flush()
    gujarat = State(id=10, country_id=1, name="Gujarat")
    kerala = State(id=11, country_id=1, name=None)
    test_db.add_all([gujarat, kerala])
    await test_db.flush()
    test_db.add_all([
        City(id=100, state_id=10, name="Ahmedabad"),
        City(id=101, state_id=10, name="Surat"),
    ])
    await test_db.commit()


@pytest.fixture
def credentials(codec, seed_user):
    return {"user_id": codec.encode(SEEDED_USER_ID), "token": SEEDED_TOKEN}
