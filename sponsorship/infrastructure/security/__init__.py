"""Security: session tokens and password hashing."""

from sponsorship.infrastructure.security.jwt import create_session_token, decode_session_token
from sponsorship.infrastructure.security.password import get_password_hash, verify_password

__all__ = [
    "create_session_token",
    "decode_session_token",
    "get_password_hash",
    "verify_password",
]
