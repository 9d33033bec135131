"""Service test fixtures — async DB, registry store and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Every test gets a fresh RegistryStore placed on app.state (no shared mutation)
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness checks see the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from campus_api.core.password_digest import hash_password
from campus_api.core.registry_entities import Course, Department
from campus_api.core.registry_store import RegistryStore
from campus_api.db.base import Base
from campus_api.infrastructure.database import get_db, DatabaseSessionManager
from campus_api.models.building import Building
from campus_api.models.housing_unit import HousingUnit
from campus_api.models.user import User
import campus_api.infrastructure.database as db_module
from campus_api.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
def registry() -> RegistryStore:
    """Two departments; course 3251 is offered by both, COMS 4156 is full."""
    coms = Department("COMS", "Luca Carloni", number_of_majors=2)
    coms.add_course("1004", Course("Adam Cannon", "417 IAB", "11:40-12:55", 400))
    full = Course("Gail Kaiser", "501 NWC", "10:10-11:25", 2)
    full.set_enrolled_student_count(2)
    coms.add_course("4156", full)
    coms.add_course("3251", Course("Tony Dear", "402 CHANDLER", "1:10-3:40", 125))

    econ = Department("ECON", "Michael Woodford", number_of_majors=0)
    econ.add_course("1105", Course("Waseem Noor", "309 HAV", "2:40-3:55", 210))
    econ.add_course("3251", Course("Miles Leahey", "702 HAM", "4:10-5:25", 86))
    return RegistryStore([coms, econ])


@pytest.fixture
async def client(test_engine, test_session_factory, registry):
    """FastAPI test client with DB dependency and registry store swapped in."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.state.registry = registry

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
    del app.state.registry
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_building(test_db):
    """A building with two housing units, plus one empty building."""
    created = datetime(2024, 9, 1, 12, 30, tzinfo=timezone.utc)
    building = Building(name="Wallach Hall", address="1116 Amsterdam Ave")
    empty = Building(name="Hartley Hall")
    test_db.add_all([building, empty])
    await test_db.flush()
    test_db.add_all([
        HousingUnit(
            building_id=building.id, unit_number="101",
            created_datetime=created, modified_datetime=created,
        ),
        HousingUnit(
            building_id=building.id, unit_number="102",
            created_datetime=created, modified_datetime=created,
        ),
    ])
    await test_db.commit()
    await test_db.refresh(building)
    await test_db.refresh(empty)
    return {"building": building, "empty": empty}


@pytest.fixture
async def seed_user(test_db):
    user = User(
        first_name="Sue",
        last_name="Donym",
        email_address="test@example.com",
        password=hash_password("password123"),
    )
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user
