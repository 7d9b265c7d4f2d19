"""Boundary Protocols: contracts between the API layer and the document store.

Invariants:
    - Routes and services depend on these Protocols, never on pymongo types
    - Documents cross the boundary as plain dicts without the store's _id
    - Update methods report how many documents matched; callers may ignore it

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
"""

from typing import Protocol

from hospital.core.domain_types import AppointmentId, DoctorId, PatientId


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def username_exists(self, username: str) -> bool: ...
    async def insert(self, user: dict) -> None: ...


class DoctorRepository(Protocol):
    """Contract for the doctor directory."""
    async def list_all(self) -> list[dict]: ...
    async def get(self, doctor_id: DoctorId) -> dict | None: ...
    async def insert(self, doctor: dict) -> None: ...
    async def set_schedule(
        self, doctor_id: DoctorId, schedule: list[str],
    ) -> int: ...


class PatientRepository(Protocol):
    """Contract for patient schedule mutation."""
    async def get(self, patient_id: PatientId) -> dict | None: ...
    async def push_appointment(
        self, patient_id: PatientId, appointment: str,
    ) -> int: ...
    async def replace_appointment(
        self, patient_id: PatientId, appointment_id: AppointmentId,
        replacement: str,
    ) -> int: ...
    async def pull_appointment(
        self, patient_id: PatientId, appointment_id: AppointmentId,
    ) -> int: ...
