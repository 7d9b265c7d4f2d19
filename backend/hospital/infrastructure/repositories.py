"""Mongo Repositories: implementations of core/repository_protocols.py.

Invariants:
    - Reads project away _id; callers only ever see plain field dicts
    - Every update is a single update_one with an operator ($set/$push/$pull)
    - No upserts: updates against a missing document match nothing and succeed
    - insert() copies its argument (the driver mutates inserted dicts)
"""

import logging

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from hospital.core.domain_types import (
    AppointmentId, Collection, DoctorId, PatientId,
)
from hospital.core.errors import UsernameTakenError

logger = logging.getLogger(__name__)

NO_ID = {"_id": 0}


class MongoUserRepository:
    def __init__(self, database: AsyncDatabase):
        self.collection = database[Collection.USERS.value]

    async def username_exists(self, username: str) -> bool:
        count = await self.collection.count_documents({"username": username})
        return count > 0

    async def insert(self, user: dict) -> None:
        try:
            await self.collection.insert_one(dict(user))
        except DuplicateKeyError as e:
            # Lost the check-then-insert race against a concurrent signup
            raise UsernameTakenError(user.get("username", "")) from e


class MongoDoctorRepository:
    def __init__(self, database: AsyncDatabase):
        self.collection = database[Collection.DOCTORS.value]

    async def list_all(self) -> list[dict]:
        return [doc async for doc in self.collection.find({}, NO_ID)]

    async def get(self, doctor_id: DoctorId) -> dict | None:
        return await self.collection.find_one({"id": doctor_id}, NO_ID)

    async def insert(self, doctor: dict) -> None:
        await self.collection.insert_one(dict(doctor))

    async def set_schedule(
        self, doctor_id: DoctorId, schedule: list[str],
    ) -> int:
        result = await self.collection.update_one(
            {"id": doctor_id}, {"$set": {"schedule": list(schedule)}},
        )
        return result.matched_count


class MongoPatientRepository:
    def __init__(self, database: AsyncDatabase):
        self.collection = database[Collection.PATIENTS.value]

    async def get(self, patient_id: PatientId) -> dict | None:
        return await self.collection.find_one({"id": patient_id}, NO_ID)

    async def push_appointment(
        self, patient_id: PatientId, appointment: str,
    ) -> int:
        result = await self.collection.update_one(
            {"id": patient_id}, {"$push": {"schedule": appointment}},
        )
        return result.matched_count

    async def replace_appointment(
        self, patient_id: PatientId, appointment_id: AppointmentId,
        replacement: str,
    ) -> int:
        """Replace the first schedule entry equal to appointment_id."""
        result = await self.collection.update_one(
            {"id": patient_id, "schedule": appointment_id},
            {"$set": {"schedule.$": replacement}},
        )
        if result.matched_count == 0:
            logger.info(
                "No schedule entry matched; update is a no-op",
                extra={"patient_id": patient_id, "collection": Collection.PATIENTS.value},
            )
        return result.matched_count

    async def pull_appointment(
        self, patient_id: PatientId, appointment_id: AppointmentId,
    ) -> int:
        """Remove every schedule entry equal to appointment_id."""
        result = await self.collection.update_one(
            {"id": patient_id}, {"$pull": {"schedule": appointment_id}},
        )
        return result.matched_count
