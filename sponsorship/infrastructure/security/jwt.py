"""Session tokens: HS256 JWT carrying the user id and token version (tid).

Bumping a user's tid invalidates every token issued before the bump.
"""

from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from sponsorship.core.config import get_settings


def create_session_token(uid: int, tid: int, expires_delta: timedelta | None = None) -> str:
    """Create a signed session token for uid at token version tid.

    Args:
        uid: User id.
        tid: Current token version of the user.
        expires_delta: Optional TTL; else uses settings.session_expire_minutes.

    Returns:
        Encoded JWT string.
    """
    settings = get_settings()
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.session_expire_minutes)
    claims: dict[str, Any] = {
        "sub": str(uid),
        "uid": uid,
        "tid": tid,
        "iat": now,
        "exp": now + expires_delta,
    }
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def decode_session_token(token: str) -> tuple[int, int]:
    """Verify a session token and return (uid, tid).

    Raises:
        ValueError: If the token is malformed, badly signed, expired, or
            its uid/tid claims are missing or not integers.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    uid = payload.get("uid")
    tid = payload.get("tid")
    # bool is an int subclass; reject it explicitly
    for claim, value in (("uid", uid), ("tid", tid)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Token claim {claim} missing or not an integer")
    if payload["sub"] != str(uid):
        raise ValueError("Token claims sub and uid disagree")
    return uid, tid
