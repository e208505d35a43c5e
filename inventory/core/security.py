# inventory/core/security.py
"""
Bearer-token and password primitives.
Tokens are HS256 JWTs signed with settings.JWT_SECRET; the algorithm list passed
to decode is always the configured one, never read from the token header.
"""
from __future__ import annotations
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt as pyjwt
from jwt.exceptions import PyJWTError

from inventory.core.config import Settings
from inventory.domain.errors import UnauthorizedError


# bcrypt only looks at the first 72 bytes; bcrypt>=5 raises ValueError beyond that
PASSWORD_MAX_BYTES = 72


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:  # malformed stored hash
        return False


def create_access_token(user_id: str, settings: Settings) -> str:
    now = datetime.now(timezone.utc)
    claims: Dict[str, Any] = {
        "sub": user_id,
        "userId": user_id,
        "iat": now,
        "exp": now + timedelta(minutes=settings.JWT_EXPIRES_MINUTES),
    }
    return pyjwt.encode(claims, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> str:
    """Return the user id carried by `token`; UnauthorizedError(403) on any decode failure."""
    try:
        payload = pyjwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except PyJWTError as e:
        raise UnauthorizedError("Invalid or expired token", status_code=403) from e

    user_id = payload.get("userId") or payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise UnauthorizedError("Invalid or expired token", status_code=403)
    return user_id
