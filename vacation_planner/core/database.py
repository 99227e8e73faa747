from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from vacation_planner.config import settings


def build_engine(url: str, echo: bool = False):
    """Async engine; in-memory SQLite shares one connection so tables persist"""
    if url.startswith("sqlite") and ":memory:" in url:
        return create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool
        )
    return create_async_engine(url, echo=echo, future=True)


# Create async engine
engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

# Create async session
async_session = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Base class for models
Base = declarative_base()


async def init_db() -> None:
    """Create all tables"""
    import vacation_planner.models  # noqa: F401 registers the models

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
