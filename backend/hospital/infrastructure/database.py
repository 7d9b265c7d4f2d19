"""Document Store Manager: one pooled MongoDB client per process, injected per request.

Invariants:
    - MongoStore is constructed once in the FastAPI lifespan and stored on app.state
    - Handlers reach the database only through the get_database dependency
    - Every PyMongoError raised inside store_errors() becomes a StoreError
    - ping() failures at startup are fatal (no retry, no backoff)

Design Decisions:
    - pymongo's native AsyncMongoClient; the client pools connections itself,
      so handlers share it without extra locking
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import OperationFailure, PyMongoError

from hospital.core.domain_types import Collection
from hospital.core.errors import StoreError

logger = logging.getLogger(__name__)


class StoreUnavailableError(RuntimeError):
    """The store did not answer the startup ping."""


@contextmanager
def store_errors(message: str, operation: str = "query") -> Iterator[None]:
    """Translate driver failures into StoreError carrying ``message``."""
    try:
        yield
    except PyMongoError as e:
        logger.error(
            f"Store {operation} failed: {e}",
            extra={"operation": operation},
        )
        raise StoreError(message) from e


class MongoStore:
    """Owns the client and exposes the application database."""

    def __init__(
        self,
        url: str,
        database_name: str = "hospital",
        server_selection_timeout_ms: int = 30_000,
        client: AsyncMongoClient | None = None,
    ):
        self.client = client or AsyncMongoClient(
            url, serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        self.database: AsyncDatabase = self.client[database_name]

    async def ping(self) -> None:
        """Verify connectivity; raise StoreUnavailableError otherwise."""
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            raise StoreUnavailableError(f"MongoDB connection error: {e}") from e

    async def ensure_indexes(self) -> bool:
        """Unique username index; duplicate signups then fail at insert time.

        Existing duplicate usernames prevent the index; the service then runs
        without it and relies on the pre-insert check alone.
        """
        try:
            await self.database[Collection.USERS.value].create_index(
                "username", unique=True,
            )
        except OperationFailure as e:
            logger.warning(
                f"Unique username index not created: {e}",
                extra={"collection": Collection.USERS.value, "operation": "create_index"},
            )
            return False
        return True

    async def health_check(self) -> bool:
        """Check connectivity for readiness probes."""
        try:
            await self.ping()
            return True
        except StoreUnavailableError as e:
            logger.error(f"Store health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.close()


def get_store(request: Request) -> MongoStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Database not initialized")
    return store


def get_database(request: Request) -> AsyncDatabase:
    """FastAPI dependency for the application database."""
    return get_store(request).database
