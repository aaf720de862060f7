"""Test configuration and fixtures.

Test setup:
1. Settings come from .env.test, loaded before any application module is imported
2. Each test gets a fresh in-memory SQLite database (aiosqlite + StaticPool)
3. The request session dependency is overridden with the test session
4. Authenticated clients override the current-user dependency directly
"""

from collections.abc import AsyncGenerator
from pathlib import Path

from dotenv import load_dotenv

# Load test environment variables before settings are instantiated
load_dotenv(Path(__file__).parent.parent / ".env.test", override=True)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from src.database.base import Base  # noqa: E402
from src.database.dependencies import get_db_session  # noqa: E402
from src.features.auth.dependencies import get_current_active_user, get_current_user  # noqa: E402
from src.features.household.models import Household  # noqa: E402
from src.features.user.models import User  # noqa: E402
from src.main import app  # noqa: E402

# Database Fixtures


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Create an in-memory database with all tables for a single test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session(db_engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Create a database session per test."""
    async with AsyncSession(bind=db_engine, expire_on_commit=False) as async_session:
        yield async_session


# FastAPI Client & Dependency Overrides


@pytest_asyncio.fixture(autouse=True)
async def override_get_db_session(session: AsyncSession):
    """Override the database session dependency with the test session.

    Endpoints and the test body then see the same data.
    """

    async def _get_test_session():
        yield session

    app.dependency_overrides[get_db_session] = _get_test_session
    yield
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create an unauthenticated async HTTP test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


# Test Data Factories


@pytest_asyncio.fixture
async def make_user(session: AsyncSession):
    """Factory fixture to create test users with custom fields.

    Usage:
        user = await make_user()                               # defaults
        other = await make_user(email="other@example.com")     # custom email
        member = await make_user(household_id=household.id)    # household member
    """
    counter = 0

    async def _factory(
        email=None,
        first_name="Test",
        last_name="User",
        age=30,
        password="TestPass123!",
        household_id=None,
    ) -> User:
        nonlocal counter
        counter += 1

        user = User(
            email=email or f"testuser{counter}@example.com",
            first_name=first_name,
            last_name=last_name,
            age=age,
            hashed_password=User.hash_password(password),
            household_id=household_id,
        )
        session.add(user)
        await session.flush()
        return user

    yield _factory


@pytest_asyncio.fixture
async def make_household(session: AsyncSession):
    """Factory fixture to create a household with the given members."""

    async def _factory(name: str = "Smiths", members: list[User] | None = None) -> Household:
        members = members or []
        household = Household(name=name, created_by=members[0].id if members else "0" * 24)
        session.add(household)
        await session.flush()
        for member in members:
            member.household_id = household.id
        await session.flush()
        return household

    yield _factory


def _authenticate_as(user: User) -> None:
    async def override_get_current_user():
        return user

    app.dependency_overrides[get_current_user] = override_get_current_user
    app.dependency_overrides[get_current_active_user] = override_get_current_user


@pytest_asyncio.fixture
async def auth_client(client: AsyncClient, make_user):
    """Authenticated client with a user who has no household yet.

    Overrides the auth dependency directly - no JWT issued, no login endpoint hit.

    Returns:
        tuple: (client, user) - both the HTTP client and the authenticated user

    """
    user = await make_user()
    _authenticate_as(user)
    yield client, user


@pytest_asyncio.fixture
async def household_client(client: AsyncClient, make_user, make_household):
    """Authenticated client whose user belongs to the "Smiths" household.

    Returns:
        tuple: (client, user, household)

    """
    user = await make_user(first_name="Alice", last_name="Smith")
    household = await make_household("Smiths", members=[user])
    _authenticate_as(user)
    yield client, user, household


@pytest.fixture
def login_as():
    """Switch the authenticated user of the test client."""
    return _authenticate_as
