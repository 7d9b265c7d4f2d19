"""Process entry point: validate settings, then run uvicorn on HOST:PORT.

Invariants:
    - A missing or empty DB_BASE_URL exits with status 1 before any import of the app
    - uvicorn imports the single module-level app (hospital.main:app)
"""

import logging
import sys

import uvicorn
from pydantic import ValidationError

from hospital.config import get_settings
from hospital.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def serve() -> None:
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Listening on {settings.host}:{settings.port}")

    # hospital.main:app reads the same cached settings validated above
    uvicorn.run(
        "hospital.main:app", host=settings.host, port=settings.port,
        log_config=None,
    )
