"""GET/PUT /settings/content-dna."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from content_hub.db import get_db
from content_hub.models.schemas import ContentDNA
from content_hub.routes.deps import get_session_context
from content_hub.services.auth_service import SessionContext
from content_hub.services.content_dna_service import ContentDNAService

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/content-dna", response_model=ContentDNA)
async def get_content_dna(
    ctx: SessionContext = Depends(get_session_context),
    session: AsyncSession = Depends(get_db),
):
    """Onboarding answers used to tailor generated content."""
    return await ContentDNAService(session).get(ctx.user_id)


@router.put("/content-dna", response_model=ContentDNA)
async def save_content_dna(
    body: ContentDNA,
    ctx: SessionContext = Depends(get_session_context),
    session: AsyncSession = Depends(get_db),
):
    return await ContentDNAService(session).save(ctx.user_id, body)
