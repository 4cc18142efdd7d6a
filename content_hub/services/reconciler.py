"""Result reconciler: find the persisted row behind a partial generation result."""
import asyncio

from content_hub.config import settings
from content_hub.errors import PersistenceFailed, ReconciliationFailed
from content_hub.models.schemas import PartialResult, PersistedPost
from content_hub.services.auth_service import SessionContext, require_session
from content_hub.services.post_gateway import PostGateway
from content_hub.utils.logging import get_logger

logger = get_logger(__name__)


class ResultReconciler:
    """
    The generation endpoint saves the row from a backend job and does not hand back its id,
    so the row is looked up: by id when the endpoint does return one, otherwise the owner's
    most recent post with exactly the same title. Two generations finishing close together
    with identical titles can still be matched to the wrong row.
    """

    def __init__(
        self,
        gateway: PostGateway,
        attempts: int | None = None,
        interval_seconds: float | None = None,
    ):
        self.gateway = gateway
        self.attempts = max(1, attempts if attempts is not None else settings.reconcile_attempts)
        self.interval_seconds = (
            interval_seconds if interval_seconds is not None else settings.reconcile_interval_seconds
        )

    async def _lookup(self, ctx: SessionContext, partial: PartialResult) -> PersistedPost | None:
        if partial.id:
            return await self.gateway.get(partial.id, ctx.user_id)
        return await self.gateway.find_latest_by_title(ctx.user_id, partial.title)

    async def reconcile(self, ctx: SessionContext | None, partial: PartialResult) -> PersistedPost:
        ctx = require_session(ctx)
        for attempt in range(1, self.attempts + 1):
            try:
                post = await self._lookup(ctx, partial)
            except PersistenceFailed as e:
                logger.warning("reconcile_store_error", user_id=ctx.user_id, title=partial.title, error=e.message)
                raise ReconciliationFailed() from e
            if post is not None:
                logger.info("reconciled", user_id=ctx.user_id, post_id=post.id, attempt=attempt)
                return post
            if attempt < self.attempts:
                await asyncio.sleep(self.interval_seconds)
        logger.warning("reconcile_not_found", user_id=ctx.user_id, title=partial.title, attempts=self.attempts)
        raise ReconciliationFailed()
