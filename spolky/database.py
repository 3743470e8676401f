"""
Připojení k databázi / Database connection.
Podporuje SQLite (dev) a PostgreSQL (prod) přes SQLAlchemy 2.0 async.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from spolky.config import settings

_is_sqlite = settings.DATABASE_URL.startswith("sqlite")

# Konfigurace enginu / Engine configuration
_engine_kwargs: dict = {
    "echo": False,
}

# PostgreSQL : connection pooling
if not _is_sqlite:
    _engine_kwargs.update({
        "pool_size": 10,
        "max_overflow": 20,
        "pool_timeout": 30,
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    })

engine = create_async_engine(settings.DATABASE_URL, **_engine_kwargs)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


class Base(DeclarativeBase):
    pass


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """Zapnout cizí klíče v SQLite / Turn on FK enforcement for SQLite connections.

    Nutné pro ON DELETE SET NULL u předsedy / Needed for chairman ON DELETE SET NULL.
    """

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


if _is_sqlite:
    enable_sqlite_foreign_keys(engine)


async def get_db() -> AsyncSession:
    """FastAPI závislost pro DB session / FastAPI dependency for DB session."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db():
    """Vytvořit tabulky při startu / Create tables on startup."""
    # Import modelů naplní metadata / Import models to populate metadata
    import spolky.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
