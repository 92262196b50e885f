import secrets
from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from models.auth import CallerIdentity
from services.auth_service import AuthService
from services.product_service import ProductService
from services.restaurant_service import RestaurantService
from settings.config import Settings
from utils.jwt_handler import decode_access_token
from utils.logger import get_logger

logger = get_logger("Dependencies")

# tells fastapi to expect a bearer token in the Authorization header
bearer_scheme = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service

def get_restaurant_service(request: Request) -> RestaurantService:
    return request.app.state.restaurant_service

def get_product_service(request: Request) -> ProductService:
    return request.app.state.product_service


async def get_current_restaurant(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> CallerIdentity:
    """
    Decode the bearer token into the caller's identity.
    Services receive this value explicitly and trust it.
    """
    if credentials is None:
        logger.debug("Request without bearer token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials, settings.JWT_SECRET, settings.JWT_ALGORITHM)
    caller = CallerIdentity(restaurant_id=payload["id"], email=payload["sub"])
    logger.debug(f"Caller resolved from token: {caller.restaurant_id}")
    return caller


async def require_admin(
    x_admin_key: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    """
    Admin endpoints are called by the platform's admin service with a shared key.
    """
    if not settings.ADMIN_API_KEY or not x_admin_key or not secrets.compare_digest(x_admin_key, settings.ADMIN_API_KEY):
        logger.warning("Forbidden: admin endpoint called without a valid admin key")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden: admin access required")
