"""Sdílené fixtures / Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import spolky.models  # noqa: F401
from spolky.database import Base, enable_sqlite_foreign_keys, get_db
from spolky.main import app
from spolky.models.club import Club
from spolky.models.user import Role, User
from spolky.rate_limit import limiter
from spolky.schemas.user import ActingUser
from spolky.utils.auth import create_access_token

limiter.enabled = False


@pytest.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(eng)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as s:
        yield s


@pytest.fixture
async def client(session_factory):
    async def _get_db():
        async with session_factory() as s:
            try:
                yield s
                await s.commit()
            except Exception:
                await s.rollback()
                raise

    app.dependency_overrides[get_db] = _get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def make_user(session_factory, username: str, role: Role) -> User:
    async with session_factory() as s:
        user = User(
            username=username,
            email=f"{username}@example.com",
            name=username.capitalize(),
            surname="Test",
            hashed_password="not-a-real-hash",
            role=role,
        )
        s.add(user)
        await s.commit()
        return user


@pytest.fixture
async def users(session_factory):
    """Jeden uživatel pro každou roli / One user per role."""
    return {
        Role.ADMIN: await make_user(session_factory, "admin", Role.ADMIN),
        Role.CHAIRMAN: await make_user(session_factory, "chair", Role.CHAIRMAN),
        Role.READ_ONLY: await make_user(session_factory, "reader", Role.READ_ONLY),
        Role.PUBLIC: await make_user(session_factory, "visitor", Role.PUBLIC),
    }


def auth(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


def as_actor(user: User) -> ActingUser:
    return ActingUser(id=user.id, username=user.username)


@pytest.fixture
async def club(session_factory, users):
    """Club{name="Rex Club", guidelines=None} řízený předsedou / chaired by chair."""
    async with session_factory() as s:
        c = Club(name="Rex Club", registration_number="12345678", address="Brno", chairman_id=users[Role.CHAIRMAN].id)
        s.add(c)
        await s.commit()
        return c
