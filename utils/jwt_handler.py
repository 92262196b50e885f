from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from core.exceptions import InvalidToken
from utils.logger import get_logger

logger = get_logger("JWT_HANDLER")

DEFAULT_ALGORITHM = "HS256"


def create_access_token(restaurant_id: str, email: str, ttl: timedelta, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Creates a signed JWT for a restaurant owner. The token carries the
    restaurant id, the owner email (as ``sub``) and an absolute expiry.
    """
    now = datetime.now(timezone.utc)
    expire = now + ttl
    to_encode = {
        "id": restaurant_id,
        "sub": email,
        "iat": now,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, secret, algorithm=algorithm)
    logger.info(f"Access token created for restaurant {restaurant_id} with expiry {expire}")
    return encoded_jwt


def decode_access_token(token: str, secret: str, algorithm: str = DEFAULT_ALGORITHM) -> dict:
    """
    Decode JWT token and return payload.
    Raises InvalidToken if the signature, expiry or claims are wrong.
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
    except JWTError:
        logger.warning("JWT Error: Invalid token")
        raise InvalidToken()
    if not payload.get("id") or not payload.get("sub"):
        logger.warning("JWT missing id/sub claims")
        raise InvalidToken("Invalid token: missing claims")
    return payload
