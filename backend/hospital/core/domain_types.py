"""Domain Types: identity aliases and collection names.

Invariants:
    - Doctor and patient ids are caller-assigned strings, never generated here
    - Collection names match the persisted layout (note: "doctor" is singular)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DoctorId = NewType("DoctorId", str)
PatientId = NewType("PatientId", str)
AppointmentId = NewType("AppointmentId", str)  # opaque schedule entry


# ─── Enums ───────────────────────────────────────────────────────

class Collection(str, Enum):
    """Document collections under the hospital database."""
    USERS = "users"
    DOCTORS = "doctor"
    PATIENTS = "patients"
