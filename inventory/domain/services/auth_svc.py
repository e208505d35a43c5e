# inventory/domain/services/auth_svc.py
import logging
from typing import Any, Dict, Tuple

from inventory.core.config import Settings
from inventory.core.security import PASSWORD_MAX_BYTES, create_access_token, hash_password, verify_password
from inventory.domain.errors import ConflictError, DuplicateKeyError, UnauthorizedError, ValidationError
from inventory.domain.models.user import User
from inventory.domain.repositories.user_repo import UserRepo

logger = logging.getLogger(__name__)


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


async def register_user_svc(
    repo: UserRepo,
    settings: Settings,
    *,
    username: Any,
    email: Any,
    password: Any,
) -> Tuple[str, User]:
    """Create an account and return (access token, user)."""
    username, email = _clean(username), _clean(email).lower()
    password = password if isinstance(password, str) else ""

    errors: Dict[str, str] = {}
    if not username:
        errors["username"] = "Username is required"
    if not email or "@" not in email:
        errors["email"] = "A valid email is required"
    if len(password) < settings.password_min_length:
        errors["password"] = f"Password must be at least {settings.password_min_length} characters"
    elif len(password.encode("utf-8")) > PASSWORD_MAX_BYTES:
        errors["password"] = f"Password must be at most {PASSWORD_MAX_BYTES} bytes"
    if errors:
        raise ValidationError(errors, message="Please provide username, email and password")

    if await repo.exists(email=email, username=username):
        raise ConflictError("User already exists")
    try:
        user = await repo.insert(username=username, email=email, password_hash=hash_password(password))
    except DuplicateKeyError as e:  # lost a race with a concurrent registration
        raise ConflictError("User already exists", error=f"Duplicate {e.field}") from e

    logger.info("auth.register user_id=%s", user.id)
    return create_access_token(user.id, settings), user


async def login_user_svc(
    repo: UserRepo,
    settings: Settings,
    *,
    email: Any,
    password: Any,
) -> Tuple[str, User]:
    email = _clean(email).lower()
    password = password if isinstance(password, str) else ""
    errors: Dict[str, str] = {}
    if not email:
        errors["email"] = "Email is required"
    if not password:
        errors["password"] = "Password is required"
    if errors:
        raise ValidationError(errors, message="Please provide email and password")

    user = await repo.get_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("auth.login rejected email=%s", email)
        raise UnauthorizedError("Invalid credentials")

    logger.info("auth.login user_id=%s", user.id)
    return create_access_token(user.id, settings), user
