import uuid
from datetime import timedelta
from core.exceptions import EmailAlreadyExists, InvalidCredentials, RestaurantBanned, RestaurantNotFound, StoreError
from db.repository import RestaurantRepository
from models.auth import SignupRequest
from models.restaurant import Restaurant
from settings.config import Settings
from utils.hash import InvalidHashFormat, hash_password, verify_password
from utils.jwt_handler import create_access_token
from utils.logger import get_logger

logger = get_logger("AUTH_SERVICE")

# verified on the unknown-email path so both login failures cost one bcrypt check
_DUMMY_HASH = hash_password("dummy-password")


class AuthService:
    """Restaurant owner signup and login."""

    def __init__(self, repository: RestaurantRepository, settings: Settings):
        self.repository = repository
        self.settings = settings
        self.token_ttl = timedelta(hours=settings.TOKEN_EXPIRE_HOURS)

    def _issue_token(self, restaurant: Restaurant) -> str:
        return create_access_token(
            restaurant.id,
            restaurant.owner_email,
            self.token_ttl,
            self.settings.JWT_SECRET,
            self.settings.JWT_ALGORITHM,
        )

    async def signup(self, payload: SignupRequest) -> tuple[str, str]:
        """
        Register a restaurant and return (restaurant_id, token).
        The pre-check gives a fast answer; the unique index on owner_email
        still rejects a concurrent duplicate at insert time.
        """
        logger.info(f"Restaurant signup request received for email: {payload.owner_email}")
        try:
            await self.repository.get_restaurant_by_email(payload.owner_email)
        except RestaurantNotFound:
            pass
        else:
            logger.warning(f"Signup rejected, email already registered: {payload.owner_email}")
            raise EmailAlreadyExists()

        restaurant = Restaurant(
            id=str(uuid.uuid4()),
            owner_email=payload.owner_email,
            password_hash=hash_password(payload.password),
            name=payload.restaurant_name,
            phone_number=payload.phone_number,
            is_banned=False,
            ban_reason="",
            address=payload.address,
        )
        await self.repository.create_restaurant(restaurant)
        logger.info(f"Restaurant created with id: {restaurant.id}")
        return restaurant.id, self._issue_token(restaurant)

    async def login(self, email: str, password: str) -> tuple[str, str]:
        logger.info(f"Login attempt for: {email}")
        try:
            restaurant = await self.repository.get_restaurant_by_email(email)
        except RestaurantNotFound:
            verify_password(password, _DUMMY_HASH)
            logger.warning(f"Login failed: restaurant not found {email}")
            raise InvalidCredentials()

        try:
            password_ok = verify_password(password, restaurant.password_hash)
        except InvalidHashFormat:
            logger.error(f"Stored password hash for restaurant {restaurant.id} is malformed")
            raise StoreError("Stored credentials are unreadable")
        if not password_ok:
            logger.warning(f"Login failed: wrong password {email}")
            raise InvalidCredentials()

        # only reported once the credentials are known to be valid
        if restaurant.is_banned:
            logger.warning(f"Login refused for banned restaurant {restaurant.id}")
            raise RestaurantBanned(restaurant.ban_reason)

        logger.info(f"Login successful: {email}")
        return restaurant.id, self._issue_token(restaurant)
