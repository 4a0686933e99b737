"""Shared fixtures: in-memory database, HTTP client, accounts and a fake AI provider."""

import os

# Settings are read at import time; configure the test environment first
os.environ["ENV"] = "test"
os.environ["LOG_FILE"] = ""
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET"] = "test-jwt-secret"
os.environ["OPENAI_API_KEY"] = ""

import json

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db import Base, get_db
from app.models import User, UserRole
from app.services.account_service import account_service
from app.services.ai import generation_service
from app.services.auth import TokenClaims, credential_service
from main import app

PASSWORD = "password123"

VALID_HTML = "<!DOCTYPE html><html><head><title>Bakery</title></head><body><h1>Fresh bread</h1></body></html>"
VALID_CSS = "body { margin: 0; }"
VALID_RESPONSE = json.dumps({"html": VALID_HTML, "css": VALID_CSS})

engine = create_async_engine(
    "sqlite+aiosqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@event.listens_for(engine.sync_engine, "connect")
def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def setup_database():
    """Create tables before each test and drop them after."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def db(setup_database):
    async with TestingSessionLocal() as session:
        yield session


@pytest.fixture
async def client(setup_database):
    async def override_get_db():
        async with TestingSessionLocal() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def make_user(
    db: AsyncSession,
    email: str = "client@example.com",
    role: UserRole = UserRole.CLIENT,
    **fields,
) -> User:
    user = await account_service.create(
        db,
        email,
        credential_service.hash_password(PASSWORD),
        name=email.split("@")[0].title(),
        role=role,
    )
    if fields:
        for field, value in fields.items():
            setattr(user, field, value)
        await db.commit()
        await db.refresh(user)
    return user


def bearer(user: User) -> dict:
    token = credential_service.issue_token(
        TokenClaims(id=str(user.id), email=user.email, role=user.role)
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client_user(db):
    return await make_user(db)


@pytest.fixture
async def admin_user(db):
    return await make_user(db, email="admin@example.com", role=UserRole.ADMIN)


class FakeProvider:
    """Records calls and returns queued responses (or raises a queued error)."""

    def __init__(self):
        self.responses: list[str] = []
        self.error: Exception | None = None
        self.calls: list[dict] = []

    async def complete(self, system_prompt, user_prompt, *, max_tokens, temperature):
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return VALID_RESPONSE


@pytest.fixture
def fake_provider(monkeypatch):
    provider = FakeProvider()
    monkeypatch.setattr(generation_service, "provider", provider)
    return provider
