"""Shared fixtures: in-memory SQLite store, a logged-in session context, test webhook URLs."""
import os
from datetime import datetime, timedelta, timezone

# Settings are read at import time
os.environ.setdefault("SUPABASE_URL", "https://project.supabase.test")
os.environ.setdefault("SUPABASE_KEY", "anon-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["BLOG_GENERATION_URL"] = "https://gen.test/blog/manual-generate"
os.environ["POST_GENERATION_URL"] = "https://gen.test/generate/manual"
os.environ["LINKEDIN_PUBLISH_URL"] = "https://hooks.test/linkedin"
os.environ["VIDEO_SCRIPT_URL"] = "https://hooks.test/generate-video-script"
os.environ["VIDEO_GENERATION_URL"] = "https://hooks.test/video-generator"

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from content_hub.models.db_models import Base, BlogPost
from content_hub.services.auth_service import SessionContext
from content_hub.services.board import reset_boards

BASE_TIME = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def engine():
    eng = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest.fixture
def ctx():
    return SessionContext(access_token="jwt-token", user_id="user-1", email="owner@example.com")


@pytest.fixture(autouse=True)
def _fresh_boards():
    reset_boards()
    yield
    reset_boards()


@pytest.fixture
def add_post(db_session):
    """Insert a blog_posts row the way the generation backend would."""

    async def _add(title, user_id="user-1", minutes=0, **fields):
        post = BlogPost(
            title=title,
            user_id=user_id,
            created_at=BASE_TIME + timedelta(minutes=minutes),
            **fields,
        )
        db_session.add(post)
        await db_session.commit()
        return post

    return _add
