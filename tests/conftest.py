from __future__ import annotations

import os

os.environ.setdefault("TASKASSIST_ENVIRONMENT", "test")

from collections.abc import AsyncIterator, Awaitable, Callable  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from taskassist import models  # noqa: E402,F401
from taskassist.core.config import get_settings  # noqa: E402
from taskassist.core.security import create_access_token  # noqa: E402
from taskassist.deps import get_db_session  # noqa: E402
from taskassist.main import create_app  # noqa: E402
from taskassist.models import User  # noqa: E402
from taskassist.services import UserService  # noqa: E402

UserFactory = Callable[..., Awaitable[User]]


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    engine: AsyncEngine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncIterator[AsyncSession]:
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        try:
            yield session
        finally:
            if session.in_transaction():
                await session.rollback()


@pytest_asyncio.fixture
async def user_factory(session: AsyncSession) -> UserFactory:
    service = UserService(session)

    async def _create(username: str, password: str = "password123", **fields) -> User:
        return await service.create_user(username=username, password=password, **fields)

    return _create


@pytest_asyncio.fixture
async def app(session: AsyncSession) -> AsyncIterator[FastAPI]:
    get_settings.cache_clear()
    app = create_app()

    async def _override_db_session():
        yield session

    app.dependency_overrides[get_db_session] = _override_db_session
    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    def _headers(user: User) -> dict[str, str]:
        token = create_access_token(
            subject=user.id,  # type: ignore[arg-type]
            roles=[user.role.value],
            settings=get_settings(),
        )
        return {"Authorization": f"Bearer {token.token}"}

    return _headers
