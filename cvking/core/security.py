import logging
import bcrypt
from cvking.core.config import BCRYPT_ROUNDS

logger = logging.getLogger(__name__)

BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > BCRYPT_MAX_BYTES:
        logger.warning("Password exceeds 72 bytes, truncating before hashing")
        password_bytes = password_bytes[:BCRYPT_MAX_BYTES]
    return password_bytes


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash a password with bcrypt.

    The CVKing backend checks passwords with bcryptjs, which accepts the
    `$2b$` hashes produced here, so the result can be written straight
    into `users.password`.

    Args:
        password: Plain text password
        rounds: bcrypt cost factor (the backend seeds with 12)

    Returns:
        Hashed password string

    Raises:
        ValueError: If the password is empty or cannot be hashed
    """
    if not password:
        raise ValueError("Password must not be empty")
    try:
        return bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")
    except ValueError as e:
        logger.error(f"Password hashing failed: {e}")
        raise ValueError("Invalid password") from e


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a bcrypt hash; malformed hashes never match."""
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
    except (ValueError, TypeError) as e:
        logger.debug(f"Password hash not recognised: {e}")
        return False
