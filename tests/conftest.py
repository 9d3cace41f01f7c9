"""Pytest configuration and fixtures."""

import sys
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any
from uuid import uuid4

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base, UserModel
from infrastructure.github.client import GitHubClient


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Fixed test user ID for consistency
TEST_USER_ID = uuid4()

GITHUB_REPOS = [
    {
        "id": 1296269,
        "name": "Hello-World",
        "full_name": "octocat/Hello-World",
        "html_url": "https://github.com/octocat/Hello-World",
        "description": "My first repository on GitHub!",
        "language": None,
        "stargazers_count": 80,
        "watchers_count": 80,
        "forks_count": 9,
        "created_at": "2011-01-26T19:01:12Z",
    },
    {
        "id": 1300192,
        "name": "Spoon-Knife",
        "full_name": "octocat/Spoon-Knife",
        "html_url": "https://github.com/octocat/Spoon-Knife",
        "description": "This repo is for demonstration purposes only.",
        "language": "HTML",
        "stargazers_count": 12000,
        "watchers_count": 12000,
        "forks_count": 140000,
        "created_at": "2011-01-27T19:30:43Z",
    },
]


def github_handler(request: httpx.Request) -> httpx.Response:
    """Stand-in for the GitHub API used by the test client."""
    if request.url.path == "/users/octocat/repos":
        return httpx.Response(200, json=GITHUB_REPOS)
    if request.url.path == "/users/unreachable/repos":
        raise httpx.ConnectError("connection refused", request=request)
    return httpx.Response(404, json={"message": "Not Found"})


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def test_user() -> TokenUser:
    """Create a test user with fixed ID."""
    return TokenUser(
        id=TEST_USER_ID,
        email="test@example.com",
        name="Test User",
    )


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def auth_token(auth_provider: JWTAuthProvider, test_user: TokenUser) -> str:
    """Create auth token for test user."""
    return str(auth_provider.create_token(test_user))


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
async def github_client() -> AsyncGenerator[GitHubClient, None]:
    """GitHub client backed by an in-process mock transport."""
    http = httpx.AsyncClient(
        base_url="https://api.github.test",
        transport=httpx.MockTransport(github_handler),
    )
    client = GitHubClient(http)
    yield client
    await client.aclose()


@pytest.fixture
async def seed_user(session_factory: async_sessionmaker[AsyncSession]):
    """Insert a user row; returns an async callable."""

    async def _seed(user: TokenUser, avatar: str | None = None) -> None:
        async with session_factory() as session:
            session.add(
                UserModel(
                    id=user.id,
                    email=user.email,
                    name=user.name or user.email,
                    avatar=avatar,
                )
            )
            await session.commit()

    return _seed


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


def _build_app(
    session_factory: async_sessionmaker[AsyncSession],
    github_client: GitHubClient,
    auth_provider: JWTAuthProvider,
    user: TokenUser | None,
) -> Any:
    """Create the app wired to the test database and GitHub stand-in."""
    from api.dependencies.auth import get_auth_provider, get_current_user
    from api.v1.dependencies import get_github_client, get_profile_service
    from domain.services.profile_service import ProfileService
    from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
    from main import create_app

    app = create_app()

    def test_uow_factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    def override_get_profile_service() -> ProfileService:
        return ProfileService(test_uow_factory)

    app.dependency_overrides[get_profile_service] = override_get_profile_service
    app.dependency_overrides[get_github_client] = lambda: github_client
    app.dependency_overrides[get_auth_provider] = lambda: auth_provider

    if user is not None:

        async def override_get_user() -> TokenUser:
            return user

        app.dependency_overrides[get_current_user] = override_get_user

    return app


@pytest.fixture
async def public_client(
    session_factory: async_sessionmaker[AsyncSession],
    github_client: GitHubClient,
    auth_provider: JWTAuthProvider,
) -> AsyncGenerator[AsyncClient, None]:
    """Test client against the test database without a signed-in user.

    Private routes still go through the real bearer-token check, using
    ``auth_provider``.
    """
    app = _build_app(session_factory, github_client, auth_provider, user=None)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def authenticated_client(
    session_factory: async_sessionmaker[AsyncSession],
    github_client: GitHubClient,
    auth_provider: JWTAuthProvider,
    test_user: TokenUser,
    seed_user: Any,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create authenticated test client with proper database and auth overrides.

    This client:
    - Uses an in-memory SQLite database
    - Injects a user row for the test user
    - Overrides auth dependency to return the test user
    - Overrides the profile service to use the test session factory
    """
    await seed_user(test_user, avatar="https://avatars.test/test-user.png")

    app = _build_app(session_factory, github_client, auth_provider, user=test_user)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
