"""Repository dependencies, built per request from the injected database."""

from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase

from hospital.infrastructure.database import get_database
from hospital.infrastructure.repositories import (
    MongoDoctorRepository, MongoPatientRepository, MongoUserRepository,
)


def get_user_repository(
    db: AsyncDatabase = Depends(get_database),
) -> MongoUserRepository:
    return MongoUserRepository(db)


def get_doctor_repository(
    db: AsyncDatabase = Depends(get_database),
) -> MongoDoctorRepository:
    return MongoDoctorRepository(db)


def get_patient_repository(
    db: AsyncDatabase = Depends(get_database),
) -> MongoPatientRepository:
    return MongoPatientRepository(db)
