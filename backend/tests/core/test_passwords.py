"""Password hashing: salted, one-way, fixed cost."""

from unittest.mock import patch

import pytest

from hospital.core.errors import PasswordHashingError
from hospital.core.passwords import BCRYPT_COST, hash_password, verify_password


def test_hash_is_not_plain_text_and_verifies():
    hashed = hash_password("hunter2")
    assert hashed != "hunter2"
    assert verify_password("hunter2", hashed)
    assert not verify_password("hunter3", hashed)


def test_hash_is_salted():
    assert hash_password("same") != hash_password("same")


def test_hash_uses_fixed_cost():
    assert hash_password("pw").split("$")[2] == f"{BCRYPT_COST:02d}"


def test_bcrypt_rejection_becomes_hashing_error():
    with patch("hospital.core.passwords.bcrypt.hashpw", side_effect=ValueError("too long")):
        with pytest.raises(PasswordHashingError):
            hash_password("pw")


def test_verify_against_garbage_hash_is_false():
    assert not verify_password("pw", "not-a-bcrypt-hash")


def test_password_at_byte_limit_hashes():
    assert verify_password("x" * 72, hash_password("x" * 72))


def test_password_over_byte_limit_is_rejected():
    with pytest.raises(PasswordHashingError):
        hash_password("x" * 73)


def test_byte_limit_counts_utf8_bytes_not_characters():
    # 37 two-byte characters: 74 bytes
    with pytest.raises(PasswordHashingError):
        hash_password("é" * 37)
