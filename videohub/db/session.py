from collections.abc import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from videohub.core.config import get_settings

settings = get_settings()
db_url = make_url(settings.async_database_url)
engine_kwargs = {"pool_pre_ping": True}

# Transaction poolers (pgbouncer on 6543) cannot hold pooled sessions or prepared statements.
if db_url.port == 6543:
    engine_kwargs["poolclass"] = NullPool
    engine_kwargs["connect_args"] = {"statement_cache_size": 0}

engine = create_async_engine(db_url.render_as_string(hide_password=False), **engine_kwargs)

SessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with SessionLocal() as session:
        yield session
