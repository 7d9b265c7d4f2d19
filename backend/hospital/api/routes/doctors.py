"""Doctor Directory: list, get, create, replace schedule.

Invariants:
    - Create stores the caller's id as given (no generation, no duplicate check)
    - Schedule updates replace the whole array; an unknown id is a silent no-op
    - List order is the store's natural order, unfiltered and unpaginated
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from hospital.api.dependencies import get_doctor_repository
from hospital.core.domain_types import DoctorId
from hospital.core.errors import ResourceNotFoundError, StoreError
from hospital.core.repository_protocols import DoctorRepository
from hospital.infrastructure.database import store_errors
from hospital.schemas.common import MessageResponse
from hospital.schemas.doctor import Doctor

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/doctors", tags=["doctors"])


def _decode(document: dict) -> Doctor:
    try:
        return Doctor.model_validate(document)
    except ValidationError as e:
        logger.error(f"Undecodable doctor document: {e}")
        raise StoreError("Error decoding doctor data") from e


@router.get("", response_model=list[Doctor])
async def list_doctors(
    doctors: DoctorRepository = Depends(get_doctor_repository),
):
    with store_errors("Error fetching doctor data", "find"):
        documents = await doctors.list_all()
    return [_decode(d) for d in documents]


@router.get("/{doctor_id}", response_model=Doctor)
async def get_doctor(
    doctor_id: str,
    doctors: DoctorRepository = Depends(get_doctor_repository),
):
    with store_errors("Error fetching doctor data", "find_one"):
        document = await doctors.get(DoctorId(doctor_id))
    if document is None:
        raise ResourceNotFoundError("Doctor", doctor_id)
    return _decode(document)


@router.post("", response_model=MessageResponse)
async def create_doctor(
    body: Doctor,
    doctors: DoctorRepository = Depends(get_doctor_repository),
):
    with store_errors("Error creating doctor", "insert"):
        await doctors.insert(body.to_document())
    logger.info("Doctor created", extra={"doctor_id": body.id})
    return MessageResponse(message="Doctor created successfully")


@router.put("/{doctor_id}/schedule", response_model=MessageResponse)
async def set_doctor_schedule(
    doctor_id: str,
    schedule: Annotated[list[str], Body()],
    doctors: DoctorRepository = Depends(get_doctor_repository),
):
    with store_errors("Error updating doctor's schedule", "update"):
        await doctors.set_schedule(DoctorId(doctor_id), schedule)
    return MessageResponse(message="Doctor's schedule updated successfully")
