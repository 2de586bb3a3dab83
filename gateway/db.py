from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gateway.models.schemas import Base


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Centralized session factory; routers never build their own.
    return async_sessionmaker(
        autocommit=False,
        class_=AsyncSession,
        autoflush=True,
        expire_on_commit=False,
        bind=engine,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create the users table if it does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
