"""Mongo repositories against an in-memory store.

Invariants:
    - Reads never expose _id
    - Update operators match the document-store semantics ($set, $push, positional $set, $pull)
    - Unique username index turns a racing duplicate insert into UsernameTakenError
"""

import pytest
from mongomock_motor import AsyncMongoMockClient

from hospital.core.errors import UsernameTakenError
from hospital.infrastructure.repositories import (
    MongoDoctorRepository, MongoPatientRepository, MongoUserRepository,
)


@pytest.fixture
def db():
    return AsyncMongoMockClient()["hospital"]


# --- Users --------------------------------------------------------------------

async def test_username_exists_after_insert(db):
    users = MongoUserRepository(db)
    assert not await users.username_exists("alice")
    await users.insert({"username": "alice", "password": "h", "email": ""})
    assert await users.username_exists("alice")


async def test_insert_does_not_mutate_argument(db):
    user = {"username": "alice", "password": "h", "email": ""}
    await MongoUserRepository(db).insert(user)
    assert "_id" not in user


async def test_unique_index_rejects_racing_duplicate(db):
    await db["users"].create_index("username", unique=True)
    users = MongoUserRepository(db)
    await users.insert({"username": "alice", "password": "h1", "email": ""})

    with pytest.raises(UsernameTakenError):
        await users.insert({"username": "alice", "password": "h2", "email": ""})
    assert await db["users"].count_documents({}) == 1


# --- Doctors ------------------------------------------------------------------

async def test_doctor_reads_strip_internal_id(db):
    doctors = MongoDoctorRepository(db)
    await doctors.insert({"id": "d1", "dname": "House", "schedule": []})

    assert await doctors.get("d1") == {"id": "d1", "dname": "House", "schedule": []}
    assert await doctors.list_all() == [{"id": "d1", "dname": "House", "schedule": []}]


async def test_doctor_get_missing_is_none(db):
    assert await MongoDoctorRepository(db).get("nope") is None


async def test_set_schedule_reports_match_count(db):
    doctors = MongoDoctorRepository(db)
    await doctors.insert({"id": "d1", "dname": "House", "schedule": ["Fri"]})

    assert await doctors.set_schedule("d1", ["Mon", "Wed"]) == 1
    assert await doctors.set_schedule("d2", ["Mon"]) == 0
    assert (await doctors.get("d1"))["schedule"] == ["Mon", "Wed"]


# --- Patients -----------------------------------------------------------------

@pytest.fixture
async def patients(db):
    await db["patients"].insert_one({"id": "p1", "pname": "Roe", "schedule": []})
    return MongoPatientRepository(db)


async def test_push_appends(patients):
    await patients.push_appointment("p1", "A1")
    await patients.push_appointment("p1", "A2")
    assert (await patients.get("p1"))["schedule"] == ["A1", "A2"]


async def test_push_to_missing_patient_matches_nothing(patients):
    assert await patients.push_appointment("p2", "A1") == 0
    assert await patients.get("p2") is None


async def test_replace_targets_matching_entry(patients):
    for a in ("A1", "A2"):
        await patients.push_appointment("p1", a)

    assert await patients.replace_appointment("p1", "A1", "A1-rescheduled") == 1
    assert (await patients.get("p1"))["schedule"] == ["A1-rescheduled", "A2"]


async def test_replace_without_match_is_noop(patients):
    await patients.push_appointment("p1", "A1")
    assert await patients.replace_appointment("p1", "Z", "Y") == 0
    assert (await patients.get("p1"))["schedule"] == ["A1"]


async def test_pull_removes_all_equal_entries(patients):
    for a in ("A1", "B", "A1"):
        await patients.push_appointment("p1", a)

    await patients.pull_appointment("p1", "A1")

    assert (await patients.get("p1"))["schedule"] == ["B"]
