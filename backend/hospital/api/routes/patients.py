"""Patient Appointments: book ($push), update (positional $set), cancel ($pull).

Invariants:
    - Request bodies for book/update are bare JSON strings
    - Update replaces only the first entry equal to appointment_id
    - Cancel removes every entry equal to appointment_id
    - Unmatched patient or appointment ids are silent no-ops reported as success

Design Decisions:
    - schedule_router (read-only getter) is separate and mounted only when
      EXPOSE_PATIENT_SCHEDULE is set
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Body, Depends
from pydantic import ValidationError

from hospital.api.dependencies import get_patient_repository
from hospital.core.domain_types import AppointmentId, PatientId
from hospital.core.errors import ResourceNotFoundError, StoreError
from hospital.core.repository_protocols import PatientRepository
from hospital.infrastructure.database import store_errors
from hospital.schemas.common import MessageResponse
from hospital.schemas.patient import Patient

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/patients", tags=["patients"])
schedule_router = APIRouter(prefix="/api/patients", tags=["patients"])


@router.post("/{patient_id}/appointments", response_model=MessageResponse)
async def book_appointment(
    patient_id: str,
    appointment: Annotated[str, Body()],
    patients: PatientRepository = Depends(get_patient_repository),
):
    with store_errors("Error booking appointment", "update"):
        await patients.push_appointment(PatientId(patient_id), appointment)
    return MessageResponse(message="Appointment booked successfully")


@router.put(
    "/{patient_id}/appointments/{appointment_id}",
    response_model=MessageResponse,
)
async def update_appointment(
    patient_id: str,
    appointment_id: str,
    appointment: Annotated[str, Body()],
    patients: PatientRepository = Depends(get_patient_repository),
):
    with store_errors("Error updating appointment", "update"):
        await patients.replace_appointment(
            PatientId(patient_id), AppointmentId(appointment_id), appointment,
        )
    return MessageResponse(message="Appointment updated successfully")


@router.delete(
    "/{patient_id}/appointments/{appointment_id}",
    response_model=MessageResponse,
)
async def cancel_appointment(
    patient_id: str,
    appointment_id: str,
    patients: PatientRepository = Depends(get_patient_repository),
):
    with store_errors("Error canceling appointment", "update"):
        await patients.pull_appointment(
            PatientId(patient_id), AppointmentId(appointment_id),
        )
    return MessageResponse(message="Appointment canceled successfully")


@schedule_router.get(
    "/{patient_id}/appointments", response_model=list[str],
)
async def get_patient_appointments(
    patient_id: str,
    patients: PatientRepository = Depends(get_patient_repository),
):
    with store_errors("Error fetching patient data", "find_one"):
        document = await patients.get(PatientId(patient_id))
    if document is None:
        raise ResourceNotFoundError("Patient", patient_id)
    try:
        patient = Patient.model_validate(document)
    except ValidationError as e:
        logger.error(
            f"Undecodable patient document: {e}",
            extra={"patient_id": patient_id},
        )
        raise StoreError("Error decoding patient data") from e
    return patient.schedule
