from passlib.context import CryptContext
from utils.logger import get_logger

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

logger = get_logger("HASH_UTILS")

# bcrypt only looks at the first 72 bytes of the secret
BCRYPT_MAX_BYTES = 72


class HashingError(Exception):
    """Raised when the hashing backend fails to produce a hash."""


class InvalidHashFormat(Exception):
    """Raised when a stored hash is not a recognisable bcrypt hash."""


def _truncate(password: str) -> str:
    encoded = str(password).encode("utf-8")
    if len(encoded) > BCRYPT_MAX_BYTES:
        logger.info("Password longer than bcrypt limit, truncating")
        encoded = encoded[:BCRYPT_MAX_BYTES]
    return encoded.decode("utf-8", errors="ignore")


def hash_password(password: str) -> str:
    logger.debug("Password received for hashing")
    try:
        return pwd_context.hash(_truncate(password))
    except (ValueError, TypeError, MemoryError) as e:
        logger.exception("Password hashing failed")
        raise HashingError(str(e)) from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    True iff plain_password matches hashed_password. A mismatch returns False;
    only a malformed hash raises InvalidHashFormat.
    """
    try:
        return pwd_context.verify(_truncate(plain_password), hashed_password)
    except (ValueError, TypeError) as e:
        raise InvalidHashFormat(str(e)) from e
