"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; the pre-hash gives it a fixed-length
input so long passwords are not silently truncated.
"""

import base64
import hashlib

import bcrypt


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bool(bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8")))
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode("utf-8")
