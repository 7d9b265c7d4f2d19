"""Error Hierarchy: typed exceptions for every hospital API failure mode.

Invariants:
    - Every error carries a message (str) and a kind (ErrorKind)
    - ErrorKind maps one-to-one onto an HTTP status (ERROR_STATUS)
    - to_response() always produces {"error": <message>}, nothing else
    - No internal details (driver messages, stack traces) in user-facing messages

Design Decisions:
    - Closed ErrorKind enum instead of matching on free-text messages
    - Single HospitalError base: one FastAPI handler renders all of them
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced by the API."""
    INVALID_INPUT = "invalid_input"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    STORE = "store"
    INTERNAL = "internal"


ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.CONFLICT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE: 500,
    ErrorKind.INTERNAL: 500,
}

INVALID_INPUT_MESSAGE = "Invalid input data"


class HospitalError(Exception):
    """Base exception for all hospital API errors."""

    def __init__(self, message: str, kind: ErrorKind):
        super().__init__(message)
        self.message = message
        self.kind = kind

    @property
    def http_status(self) -> int:
        return ERROR_STATUS[self.kind]

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidInputError(HospitalError):
    """Request body could not be parsed into the expected shape."""
    def __init__(self, message: str = INVALID_INPUT_MESSAGE):
        super().__init__(message, ErrorKind.INVALID_INPUT)


class UsernameTakenError(HospitalError):
    """Signup attempted with a username that already exists."""
    def __init__(self, username: str):
        super().__init__("Username is already taken", ErrorKind.CONFLICT)
        self.username = username


class ResourceNotFoundError(HospitalError):
    """Exact-match lookup returned no document."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} not found", ErrorKind.NOT_FOUND)
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(HospitalError):
    """Document store operation failed, or returned an undecodable document."""
    def __init__(self, message: str):
        super().__init__(message, ErrorKind.STORE)


class PasswordHashingError(HospitalError):
    """bcrypt refused to hash the supplied password."""
    def __init__(self):
        super().__init__("Error hashing password", ErrorKind.INTERNAL)
