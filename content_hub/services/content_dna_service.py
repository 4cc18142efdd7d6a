"""Content DNA: the user's onboarding answers, editable from settings."""
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from content_hub.errors import PersistenceFailed
from content_hub.models.db_models import Onboarding
from content_hub.models.schemas import ContentDNA
from content_hub.utils.logging import get_logger

logger = get_logger(__name__)

# ContentDNA field -> onboarding column
FIELD_COLUMNS = {
    "product_service": "question1",
    "ideal_customers": "question2",
    "problem_solved": "question3",
    "unique_style": "question4",
    "post_platforms": "question5",
}


class ContentDNAService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def _row(self, user_id: str) -> Onboarding | None:
        r = await self.session.execute(
            select(Onboarding)
            .where(Onboarding.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        return r.scalar_one_or_none()

    async def get(self, user_id: str) -> ContentDNA:
        """Answers for the user; empty strings when there is no onboarding row yet."""
        try:
            row = await self._row(user_id)
        except SQLAlchemyError as e:
            logger.warning("content_dna_load_failed", user_id=user_id, error=str(e))
            raise PersistenceFailed("Failed to load your data. Please try again.") from e
        if row is None:
            return ContentDNA()
        return ContentDNA(**{field: getattr(row, col) or "" for field, col in FIELD_COLUMNS.items()})

    async def save(self, user_id: str, dna: ContentDNA) -> ContentDNA:
        """Write all five answers; creates the row when the user never finished onboarding."""
        values = {col: getattr(dna, field) for field, col in FIELD_COLUMNS.items()}
        try:
            row = await self._row(user_id)
            if row is None:
                self.session.add(Onboarding(user_id=user_id, **values))
            else:
                for col, value in values.items():
                    setattr(row, col, value)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.warning("content_dna_save_failed", user_id=user_id, error=str(e))
            raise PersistenceFailed(f"Error saving changes: {e}") from e
        logger.info("content_dna_saved", user_id=user_id)
        return dna
