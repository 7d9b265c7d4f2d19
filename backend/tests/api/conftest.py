"""API test fixtures: in-memory MongoDB + FastAPI test client.

Invariants:
    - Every test gets a fresh mongomock database
    - get_database dependency overridden; the lifespan (real ping) never runs
    - schedule_client uses an app built with expose_patient_schedule=True
"""

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from hospital.config import Settings
from hospital.infrastructure.database import get_database
from hospital.main import app, create_app


@pytest.fixture
def mongo_db():
    return AsyncMongoMockClient()["hospital"]


@pytest.fixture
async def client(mongo_db):
    """FastAPI test client with the database dependency overridden."""
    app.dependency_overrides[get_database] = lambda: mongo_db
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def schedule_client(mongo_db):
    exposed = create_app(Settings(
        db_base_url="mongodb://localhost:27017/", expose_patient_schedule=True,
    ))
    exposed.dependency_overrides[get_database] = lambda: mongo_db
    async with AsyncClient(
        transport=ASGITransport(app=exposed), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def seed_patient(mongo_db):
    """Patients have no creation endpoint; insert one directly."""
    async def _seed(patient_id: str, schedule: list[str] | None = None):
        await mongo_db["patients"].insert_one(
            {"id": patient_id, "pname": "Jane Roe", "schedule": schedule or []},
        )
    return _seed


@pytest.fixture
def schedule_of(mongo_db):
    async def _read(patient_id: str) -> list[str]:
        doc = await mongo_db["patients"].find_one({"id": patient_id})
        return doc["schedule"]
    return _read
