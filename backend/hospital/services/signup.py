"""Signup Workflow: existence check, hash, insert.

Invariants:
    - A username that already exists is rejected before hashing
    - The plain-text password is never stored or logged
    - bcrypt runs in a worker thread, off the event loop

Design Decisions:
    - The existence check alone is racy; the unique username index
      (MongoStore.ensure_indexes) makes the insert itself reject duplicates,
      surfaced as the same UsernameTakenError
"""

import asyncio
import logging

from hospital.core.errors import UsernameTakenError
from hospital.core.passwords import hash_password
from hospital.core.repository_protocols import UserRepository
from hospital.infrastructure.database import store_errors
from hospital.schemas.user import SignupRequest

logger = logging.getLogger(__name__)


async def register_user(users: UserRepository, request: SignupRequest) -> None:
    """Create a user account or raise a HospitalError."""
    with store_errors("Error checking username availability", "count"):
        taken = await users.username_exists(request.username)
    if taken:
        raise UsernameTakenError(request.username)

    hashed = await asyncio.to_thread(hash_password, request.password)

    with store_errors("Error creating user", "insert"):
        await users.insert(request.to_document(hashed))
    logger.info("User created", extra={"collection": "users"})
