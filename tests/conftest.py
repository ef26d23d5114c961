"""Global test configuration and fixtures for YardTrack API."""

from collections.abc import AsyncGenerator
from typing import Callable

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from yardtrack.api.core.dependencies import get_db_session
from yardtrack.database.models import Base, User, UserRole
from yardtrack.modules.auth.tokens import TokenService

from tests.factories import (
    DistanceMeasurementFactory,
    FixedMarkerFactory,
    MobileMarkerFactory,
    MotorcycleFactory,
    PositionFactory,
    UserFactory,
    YardFactory,
)

TEST_BASE_URL = "http://test-yardtrack-api"


@pytest.fixture
def user_factory():
    return UserFactory


@pytest.fixture
def yard_factory():
    return YardFactory


@pytest.fixture
def motorcycle_factory():
    return MotorcycleFactory


@pytest.fixture
def position_factory():
    return PositionFactory


@pytest.fixture
def fixed_marker_factory():
    return FixedMarkerFactory


@pytest.fixture
def mobile_marker_factory():
    return MobileMarkerFactory


@pytest.fixture
def measurement_factory():
    return DistanceMeasurementFactory


@pytest_asyncio.fixture
async def async_engine():
    """In-memory SQLite engine with the full schema, one per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Session shared by the test body and the request handlers."""
    async_session_factory = async_sessionmaker(
        bind=async_engine, expire_on_commit=False
    )
    async with async_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def app(db_session: AsyncSession):
    """Create FastAPI application with lifespan manager for testing."""
    from yardtrack.main import app

    async def _override_db_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_db_session] = _override_db_session
    async with LifespanManager(app):
        yield app
    app.dependency_overrides.clear()


# Test Data Fixtures
@pytest_asyncio.fixture
async def test_yard(db_session: AsyncSession, yard_factory):
    return await yard_factory.create_async(
        db_session, name="North Yard", location="Sao Paulo"
    )


@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession, user_factory) -> User:
    return await user_factory.create_async(
        db_session, name="Test User", email="test.user@yardtrack.io"
    )


@pytest_asyncio.fixture
async def test_admin_user(db_session: AsyncSession, user_factory) -> User:
    return await user_factory.create_async(
        db_session,
        name="Admin User",
        email="admin@yardtrack.io",
        role=UserRole.ADMIN.value,
    )


# JWT Token Fixtures
@pytest.fixture()
def jwt_token_factory() -> Callable[[User], str]:
    """Factory for creating JWT tokens for test users."""
    token_service = TokenService()

    def create_token(user: User) -> str:
        return token_service.issue(user).access_token

    return create_token


@pytest_asyncio.fixture
async def user_token(test_user: User, jwt_token_factory) -> str:
    return jwt_token_factory(test_user)


@pytest_asyncio.fixture
async def admin_token(test_admin_user: User, jwt_token_factory) -> str:
    return jwt_token_factory(test_admin_user)


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing public endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url=TEST_BASE_URL
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def authorized_client(
    app: FastAPI, user_token: str
) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client with JWT authorization headers."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
        headers={"Authorization": f"Bearer {user_token}"},
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_client(
    app: FastAPI, admin_token: str
) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client with admin JWT authorization headers."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
        headers={"Authorization": f"Bearer {admin_token}"},
    ) as ac:
        yield ac


@pytest.fixture
def measurement_graph(
    db_session: AsyncSession,
    yard_factory,
    motorcycle_factory,
    position_factory,
    fixed_marker_factory,
    measurement_factory,
):
    """Build a yard with one position, one marker and N measurements."""

    async def create(distances: list[float], **position_kwargs):
        yard = await yard_factory.create_async(db_session)
        motorcycle = await motorcycle_factory.create_async(db_session)
        position = await position_factory.create_async(
            db_session,
            motorcycle_id=motorcycle.id,
            yard_id=yard.id,
            **position_kwargs,
        )
        marker = await fixed_marker_factory.create_async(db_session, yard_id=yard.id)
        for distance in distances:
            await measurement_factory.create_async(
                db_session,
                distance_m=distance,
                position_id=position.id,
                fixed_marker_id=marker.id,
            )
        return position, marker

    return create
