"""Shared fixtures: in-memory repository, services wired with test settings,
and an HTTP client bound to the FastAPI app."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from main import create_app
from models.auth import CallerIdentity, SignupRequest
from models.product import ProductCreate
from models.restaurant import Address
from services.auth_service import AuthService
from services.product_service import ProductService
from services.restaurant_service import RestaurantService
from settings.config import Settings
from tests.fakes import InMemoryRepository

TEST_SECRET = "test-jwt-secret-for-unit-tests"
ADMIN_KEY = "test-admin-key"


@pytest.fixture
def settings():
    return Settings(
        JWT_SECRET=TEST_SECRET,
        ADMIN_API_KEY=ADMIN_KEY,
        TOKEN_EXPIRE_HOURS=24,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def repo():
    return InMemoryRepository()


@pytest.fixture
def auth_service(repo, settings):
    return AuthService(repo, settings)


@pytest.fixture
def restaurant_service(repo):
    return RestaurantService(repo)


@pytest.fixture
def product_service(repo):
    return ProductService(repo)


def make_signup(email: str = "owner@example.com", password: str = "s3cret!", name: str = "Spice Route") -> SignupRequest:
    return SignupRequest(
        owner_email=email,
        password=password,
        restaurant_name=name,
        phone_number="9876543210",
        address=Address(street_name="MG Road", locality="Indiranagar", state="Karnataka", pincode="560038"),
    )


def make_product(restaurant_id: str, stock: int = 5, price: float = 120.0) -> ProductCreate:
    return ProductCreate(
        restaurant_id=restaurant_id,
        name="Paneer Tikka",
        description="Grilled cottage cheese",
        price=price,
        stock=stock,
        category="starters",
    )


@pytest_asyncio.fixture
async def owner(auth_service):
    """A signed-up restaurant; returns its caller identity."""
    restaurant_id, _ = await auth_service.signup(make_signup())
    return CallerIdentity(restaurant_id=restaurant_id, email="owner@example.com")


@pytest_asyncio.fixture
async def other_owner(auth_service):
    restaurant_id, _ = await auth_service.signup(make_signup(email="rival@example.com", name="Rival Diner"))
    return CallerIdentity(restaurant_id=restaurant_id, email="rival@example.com")


@pytest_asyncio.fixture
async def client(settings, repo):
    app = create_app(settings, repository=repo)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
