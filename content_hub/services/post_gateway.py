"""Persistence gateway for blog_posts: list, fetch, update, publish."""
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from content_hub.config import settings
from content_hub.errors import PersistenceFailed
from content_hub.models.db_models import BlogPost
from content_hub.models.schemas import PersistedPost, UIPost
from content_hub.utils.helpers import date_part
from content_hub.utils.logging import get_logger

logger = get_logger(__name__)

PUBLISHED = "published"
# Logical key callers use for the post body; the column it lands in depends on the schema
CONTENT_KEY = "content"

# Columns every schema version has. Body columns are read one at a time (see _with_body).
_META_COLUMNS = (
    BlogPost.id,
    BlogPost.user_id,
    BlogPost.title,
    BlogPost.status,
    BlogPost.views,
    BlogPost.created_at,
)


def to_ui_post(post: PersistedPost) -> UIPost:
    """Project a row onto a dashboard list entry."""
    return UIPost(
        id=post.id,
        title=post.title,
        status=post.status,
        views=post.views or 0,
        date=date_part(post.created_at),
    )


class PostGateway:
    """
    Thin owner-aware wrapper around the blog_posts table.

    Older schemas carry only one of the content columns, so queries never select the
    whole row: metadata columns are selected explicitly and each content column is read
    on its own, a missing one reading as empty.
    """

    def __init__(self, session: AsyncSession, content_fields: list[str] | None = None):
        self.session = session
        self.content_fields = list(content_fields or settings.content_field_candidates)

    def _owned(self, stmt, post_id: str, user_id: str | None):
        stmt = stmt.where(BlogPost.id == post_id)
        if user_id is not None:
            stmt = stmt.where(BlogPost.user_id == user_id)
        return stmt

    async def _rows(self, stmt) -> list[PersistedPost]:
        try:
            r = await self.session.execute(stmt)
            return [PersistedPost.model_validate(dict(row)) for row in r.mappings().all()]
        except SQLAlchemyError as e:
            logger.warning("post_query_failed", error=str(e))
            raise PersistenceFailed(f"Could not load posts: {e}") from e

    async def _read_column(self, post_id: str, column: str) -> str | None:
        try:
            r = await self.session.execute(
                select(BlogPost.__table__.c[column]).where(BlogPost.id == post_id)
            )
            return r.scalar_one_or_none()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning("post_content_column_unreadable", post_id=post_id, field=column, error=str(e))
            return None

    async def _with_body(self, post: PersistedPost | None) -> PersistedPost | None:
        if post is None:
            return None
        values = {column: await self._read_column(post.id, column) for column in self.content_fields}
        return post.model_copy(update=values)

    async def list_by_owner(self, user_id: str) -> list[PersistedPost]:
        """All posts of the owner, newest first. Bodies are not loaded."""
        return await self._rows(
            select(*_META_COLUMNS).where(BlogPost.user_id == user_id).order_by(BlogPost.created_at.desc())
        )

    async def list_published(self, user_id: str) -> list[PersistedPost]:
        """Published posts of the owner, newest first (public listing)."""
        return await self._rows(
            select(*_META_COLUMNS)
            .where(BlogPost.user_id == user_id, BlogPost.status == PUBLISHED)
            .order_by(BlogPost.created_at.desc())
        )

    async def _get_meta(self, post_id: str, user_id: str | None) -> PersistedPost | None:
        rows = await self._rows(self._owned(select(*_META_COLUMNS), post_id, user_id))
        return rows[0] if rows else None

    async def get(self, post_id: str, user_id: str | None = None) -> PersistedPost | None:
        return await self._with_body(await self._get_meta(post_id, user_id))

    async def find_latest_by_title(self, user_id: str, title: str) -> PersistedPost | None:
        """Most recent post of the owner whose title matches exactly."""
        rows = await self._rows(
            select(*_META_COLUMNS)
            .where(BlogPost.user_id == user_id, BlogPost.title == title)
            .order_by(BlogPost.created_at.desc())
            .limit(1)
        )
        return await self._with_body(rows[0] if rows else None)

    async def fetch_content(self, post_id: str, user_id: str | None = None) -> str:
        """Full body of one post (html_content, else content)."""
        post = await self.get(post_id, user_id)
        if post is None:
            raise PersistenceFailed("Post not found")
        return post.body

    async def _write(self, post_id: str, user_id: str | None, values: dict[str, Any]) -> None:
        stmt = self._owned(update(BlogPost), post_id, user_id).values(**values)
        result = await self.session.execute(stmt.execution_options(synchronize_session=False))
        if result.rowcount == 0:
            await self.session.rollback()
            raise PersistenceFailed("Post not found")
        await self.session.commit()

    def _content_attempts(self) -> list[list[str]]:
        """Every content column at once, then each one alone in candidate order."""
        if len(self.content_fields) < 2:
            return [self.content_fields]
        return [self.content_fields] + [[column] for column in self.content_fields]

    async def update(self, post_id: str, fields: dict[str, Any], user_id: str | None = None) -> PersistedPost:
        """
        Write `fields` to one post and return the stored row.
        A `content` value goes to every configured content column so that reads, which
        prefer html_content, see the edit. When the store rejects that write, the columns
        are tried one at a time in candidate order, each at most once.
        """
        values = dict(fields)
        has_content = CONTENT_KEY in values
        content = values.pop(CONTENT_KEY, None)

        current = await self._get_meta(post_id, user_id)
        if current is None:
            raise PersistenceFailed("Post not found")
        status = values.get("status")
        if status and current.status == PUBLISHED and status != PUBLISHED:
            raise PersistenceFailed("A published post cannot go back to another status")

        if not has_content and not values:
            return await self._with_body(current)
        if not has_content:
            try:
                await self._write(post_id, user_id, values)
            except SQLAlchemyError as e:
                await self.session.rollback()
                logger.warning("post_update_failed", post_id=post_id, error=str(e))
                raise PersistenceFailed(f"Could not update post: {e}") from e
        else:
            last_error: Exception | None = None
            for columns in self._content_attempts():
                try:
                    await self._write(post_id, user_id, {**values, **{c: content for c in columns}})
                    last_error = None
                    break
                except SQLAlchemyError as e:
                    await self.session.rollback()
                    logger.warning("post_update_field_failed", post_id=post_id, fields=columns, error=str(e))
                    last_error = e
            if last_error is not None:
                raise PersistenceFailed(f"Could not update post: {last_error}") from last_error

        stored = await self.get(post_id, user_id)
        if stored is None:
            raise PersistenceFailed("Post not found")
        return stored

    async def publish(self, post_id: str, user_id: str | None = None, fields: dict[str, Any] | None = None) -> PersistedPost:
        """`update` with status forced to published."""
        return await self.update(post_id, {**(fields or {}), "status": PUBLISHED}, user_id=user_id)
