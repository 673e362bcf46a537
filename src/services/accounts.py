"""Account registration and credential checks."""

import hashlib
import hmac
import secrets
from typing import Any, Optional
from pydantic import ValidationError as PydanticValidationError
from src.models.auth_context import AuthenticatedContext
from src.models.user import RegisterRequest, User
from src.services.favorites import parse_saved_properties
from src.services.store import MemoryStore
from src.utils.config import AppConfig
from src.utils.errors import AuthenticationError, ConflictError, ValidationError
from src.utils.logging import get_structured_logger, mask_email

logger = get_structured_logger(__name__)

HASH_ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, salt: Optional[str] = None, iterations: Optional[int] = None) -> str:
    """Return an encoded `algorithm$iterations$salt$digest` string."""
    salt = salt or secrets.token_hex(16)
    iterations = iterations or AppConfig.PASSWORD_HASH_ITERATIONS
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return f"{HASH_ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, encoded: str) -> bool:
    try:
        algorithm, iterations, salt, _ = encoded.split("$", 3)
    except ValueError:
        return False
    if algorithm != HASH_ALGORITHM or not iterations.isdigit():
        return False
    candidate = hash_password(password, salt=salt, iterations=int(iterations))
    return hmac.compare_digest(candidate, encoded)


def register_user(
    store: MemoryStore,
    username: str,
    password: str,
    email: str,
    full_name: str
) -> User:
    """Create an account. Username and email must both be unused."""
    try:
        request = RegisterRequest(
            username=username,
            password=password,
            email=email,
            full_name=full_name
        )
    except PydanticValidationError as e:
        raise ValidationError.from_pydantic(e)

    with store.lock:
        if store.get_user_by_username(request.username):
            raise ConflictError("Username already exists", field="username")
        if store.get_user_by_email(request.email):
            raise ConflictError("Email already exists", field="email")

        user = store.create_user({
            "username": request.username,
            "password_hash": hash_password(request.password),
            "email": request.email,
            "full_name": request.full_name,
            "saved_properties": "[]",
        })

    logger.info(
        "User registered",
        user_id=user.id,
        username=user.username,
        email=mask_email(user.email)
    )
    return user


def authenticate(store: MemoryStore, username: str, password: str) -> AuthenticatedContext:
    """Check credentials and return the actor context for the user."""
    user = store.get_user_by_username(username or "")
    if user is None or not verify_password(password or "", user.password_hash):
        logger.warning("Authentication failed", username=username)
        raise AuthenticationError("Invalid username or password")

    return AuthenticatedContext(user_id=user.id, username=user.username)


def public_user(user: User) -> dict[str, Any]:
    """User fields safe to return to clients."""
    data = user.model_dump(mode="json", exclude={"password_hash"})
    data["saved_properties"] = parse_saved_properties(user.saved_properties)
    return data
