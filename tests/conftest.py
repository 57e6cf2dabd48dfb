import pytest
import pytest_asyncio
from datetime import timedelta
import os
import sys

# Add the project directory to the Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from credential_service.core.config import settings
from credential_service.core.security import JwtService
from credential_service.services.auth import AuthService
from credential_service.schemas.user import SignupRequest, UserIdentity

TEST_SECRET_KEY = "test-secret-key-for-signing-tokens"

class UserAlreadyExists(Exception):
    """Raised by the fake store for a repeated email address."""

class FakeUserStore:
    """In-memory user store standing in for the real persistence layer."""

    def __init__(self):
        self.users: dict[str, UserIdentity] = {}
        self.calls: list[SignupRequest] = []

    async def signup(self, signup_request: SignupRequest) -> UserIdentity:
        self.calls.append(signup_request)
        if signup_request.email_address in self.users:
            raise UserAlreadyExists(f"Email address {signup_request.email_address} is already in use")
        user = UserIdentity(email_address=signup_request.email_address, name=signup_request.name)
        self.users[user.email_address] = user
        return user

@pytest.fixture
def jwt_service() -> JwtService:
    """JwtService signing with a fixed test key and the configured access expiry."""
    return JwtService(
        secret_key=TEST_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        expires_in=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )

@pytest.fixture
def user_store() -> FakeUserStore:
    return FakeUserStore()

@pytest.fixture
def auth_service(jwt_service: JwtService, user_store: FakeUserStore) -> AuthService:
    return AuthService(jwt_service=jwt_service, user_store=user_store)

@pytest.fixture
def signup_request() -> SignupRequest:
    return SignupRequest(
        email_address="test@example.com",
        name="Test User",
        password="testpass123",
    )

@pytest_asyncio.fixture
async def test_user_tokens(auth_service: AuthService, signup_request: SignupRequest):
    """Token pair for a freshly signed-up test user."""
    return await auth_service.signup(signup_request)
