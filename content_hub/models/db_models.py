"""SQLAlchemy models for the Supabase tables the dashboard reads and writes."""
import uuid
from datetime import datetime, timezone
from typing import AsyncGenerator

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from content_hub.config import settings


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    pass


class BlogPost(Base):
    """Generated blog post. Rows are written by the generation backend; the dashboard never assigns ids."""

    __tablename__ = "blog_posts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    user_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    html_content: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(String(20), default="draft")  # draft | published | scheduled
    views: Mapped[int | None] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)


class Onboarding(Base):
    """Onboarding answers ("content DNA"), one row per user."""

    __tablename__ = "onboarding"

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    question1: Mapped[str | None] = mapped_column(Text, nullable=True)  # product / service
    question2: Mapped[str | None] = mapped_column(Text, nullable=True)  # ideal customers
    question3: Mapped[str | None] = mapped_column(Text, nullable=True)  # problem solved
    question4: Mapped[str | None] = mapped_column(Text, nullable=True)  # unique style
    question5: Mapped[str | None] = mapped_column(Text, nullable=True)  # platforms


# Async engine and session factory
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def init_db(database_url: str | None = None) -> async_sessionmaker[AsyncSession]:
    """Create async engine and session factory. Call once at app startup."""
    global _engine, _session_factory
    if _session_factory is not None:
        return _session_factory
    url = (database_url or settings.database_url or "").strip()
    if not url:
        raise ValueError(
            "DATABASE_URL is not set. Add your Supabase connection string to .env. "
            "Supabase Dashboard → Settings → Database → Connection string (URI); use postgresql+asyncpg://..."
        )
    _engine = create_async_engine(url, echo=settings.log_level.upper() == "DEBUG")
    _session_factory = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)
    return _session_factory


async def dispose_db() -> None:
    """Dispose the engine and forget the session factory."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency: yield a DB session for FastAPI. Caller commits/rollbacks."""
    factory = init_db()
    async with factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_tables() -> None:
    """Create all tables. Use for dev; prefer Alembic for production."""
    init_db()
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
