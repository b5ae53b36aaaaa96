"""
User Service - registration, login and lookups
"""
from typing import Optional
import hashlib
import hmac
import logging
import secrets

from orbital.errors import AuthenticationError, NotFoundError
from orbital.models import User
from orbital.schemas.user import UserCreate
from orbital.utils.store import EntityStore

logger = logging.getLogger(__name__)

HASH_ALGORITHM = "pbkdf2_sha256"
HASH_ITERATIONS = 100_000


def hash_password(password: str, salt: Optional[str] = None) -> str:
    """Return `algorithm$iterations$salt$hexdigest`"""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), HASH_ITERATIONS
    )
    return f"{HASH_ALGORITHM}${HASH_ITERATIONS}${salt}${digest.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        algorithm, iterations, salt, expected = password_hash.split("$")
    except ValueError:
        return False
    if algorithm != HASH_ALGORITHM:
        return False

    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), int(iterations)
    )
    return hmac.compare_digest(digest.hex(), expected)


class UserService:

    def __init__(self, store: EntityStore):
        self.store = store

    def register(self, data: UserCreate) -> User:
        """
        Create a user. Username and email must both be unused,
        otherwise ConflictError names the duplicate field.
        """
        user = self.store.create_unique(
            User,
            ["username", "email"],
            username=data.username,
            email=data.email,
            full_name=data.full_name,
            password_hash=hash_password(data.password),
        )
        logger.info(f"User registered: {user.id} ({user.username})")
        return user

    def authenticate(self, username: str, password: str) -> User:
        matches = self.store.find_by_field(User, "username", username)
        if not matches or not verify_password(password, matches[0].password_hash):
            logger.warning(f"Failed login for username '{username}'")
            raise AuthenticationError(username=username)
        return matches[0]

    def get_user(self, user_id: int) -> User:
        user = self.store.get_by_id(User, user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def get_user_by_username(self, username: str) -> User:
        matches = self.store.find_by_field(User, "username", username)
        if not matches:
            raise NotFoundError("User", username)
        return matches[0]
