"""Signup request schema.

Invariants:
    - username and email default to "" when absent (not enforced)
    - password must be a non-empty string
"""

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    username: str = ""
    password: str = Field(min_length=1)
    email: str = ""

    def to_document(self, hashed_password: str) -> dict:
        """Stored user document; the plain password never reaches the store."""
        return {
            "username": self.username,
            "password": hashed_password,
            "email": self.email,
        }
