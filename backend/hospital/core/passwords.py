"""Password hashing with bcrypt at a fixed cost factor."""

import bcrypt

from hospital.core.errors import PasswordHashingError

BCRYPT_COST = 10
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Return a salted bcrypt hash of ``password`` as text.

    Raises PasswordHashingError for input bcrypt cannot hash whole
    (longer than 72 bytes once UTF-8 encoded).
    """
    encoded = password.encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        raise PasswordHashingError()
    try:
        hashed = bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=BCRYPT_COST))
    except ValueError as e:
        raise PasswordHashingError() from e
    return hashed.decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False
