from fastapi import APIRouter, Depends, status
from core.dependencies import get_auth_service
from models.auth import AuthResponse, LoginRequest, SignupRequest
from services.auth_service import AuthService
from utils.logger import get_logger

logger = get_logger("AUTH_ROUTE")

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup(payload: SignupRequest, auth_service: AuthService = Depends(get_auth_service)):
    logger.info(f"Attempting to sign up restaurant with email: {payload.owner_email}")
    restaurant_id, token = await auth_service.signup(payload)
    return AuthResponse(restaurant_id=restaurant_id, token=token, message="Restaurant registered successfully")

@router.post("/login", response_model=AuthResponse)
async def login(payload: LoginRequest, auth_service: AuthService = Depends(get_auth_service)):
    restaurant_id, token = await auth_service.login(payload.owner_email, payload.password)
    return AuthResponse(restaurant_id=restaurant_id, token=token, message="Login successful")
