"""Public blog surface: the owner's published listing and one page per post."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from content_hub.db import get_db
from content_hub.models.schemas import PublicPostDetail, PublicPostOut
from content_hub.routes.deps import get_session_context
from content_hub.services.auth_service import SessionContext
from content_hub.services.post_gateway import PUBLISHED, PostGateway

router = APIRouter(prefix="/public", tags=["public"])


@router.get("", response_model=list[PublicPostOut])
async def list_published(
    ctx: SessionContext = Depends(get_session_context),
    session: AsyncSession = Depends(get_db),
):
    """Published posts of the logged-in owner, newest first."""
    posts = await PostGateway(session).list_published(ctx.user_id)
    return [PublicPostOut(id=p.id, title=p.title, status=p.status) for p in posts]


@router.get("/{post_id}", response_model=PublicPostDetail)
async def get_published(post_id: str, session: AsyncSession = Depends(get_db)):
    """A published post by id. Drafts are not visible here."""
    post = await PostGateway(session).get(post_id)
    if post is None or post.status != PUBLISHED:
        raise HTTPException(status_code=404, detail="Post not found")
    return PublicPostDetail(
        id=post.id,
        title=post.title,
        status=post.status,
        content=post.body,
        created_at=post.created_at,
    )
