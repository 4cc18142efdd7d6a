"""Blog dashboard: generate, list, select, save, publish."""
from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from content_hub.db import get_db
from content_hub.errors import ContentHubError
from content_hub.models.schemas import (
    BoardOut,
    GenerateBlogRequest,
    GenerateBlogResponse,
    PublishPostRequest,
    SelectedPostOut,
    UpdatePostRequest,
)
from content_hub.routes.deps import get_optional_session, get_session_context
from content_hub.services.auth_service import SessionContext, require_session
from content_hub.services.board import PostBoard, get_board
from content_hub.services.post_gateway import PUBLISHED, PostGateway, to_ui_post
from content_hub.utils.logging import get_logger
from content_hub.workflow import create_blog_graph

logger = get_logger(__name__)

router = APIRouter(prefix="/blog", tags=["blog"])
_graph = None

GENERATE_SLOT = "blog.generate"
GENERATION_FAILED_MESSAGE = "Blog generation failed. Please try again."


def get_graph():
    global _graph
    if _graph is None:
        _graph = create_blog_graph()
    return _graph


async def _refresh(board: PostBoard, gateway: PostGateway, user_id: str) -> None:
    posts = await gateway.list_by_owner(user_id)
    board.replace([to_ui_post(p) for p in posts])


@router.post("/generate", response_model=GenerateBlogResponse)
async def generate_blog(
    body: GenerateBlogRequest,
    ctx: SessionContext | None = Depends(get_optional_session),
    session: AsyncSession = Depends(get_db),
):
    """Generate a blog for the topic, find the saved row, put it at the top of the list and select it."""
    ctx = require_session(ctx)
    board = get_board(ctx.user_id)
    token = board.epochs.issue(GENERATE_SLOT)
    try:
        result = await get_graph().ainvoke({"ctx": ctx, "session": session, "topic": body.topic})
    except ContentHubError:
        raise
    except Exception as e:
        logger.exception("blog_generation_flow_failed", error=str(e))
        raise HTTPException(status_code=500, detail=GENERATION_FAILED_MESSAGE) from e

    post = result["post"]
    ui_post = to_ui_post(post)
    applied = board.epochs.is_current(GENERATE_SLOT, token)
    if applied:
        board.upsert_front(ui_post, content=post.body)
        board.select(ui_post.id)
    else:
        logger.info("stale_generation_discarded", user_id=ctx.user_id, post_id=ui_post.id)
    return GenerateBlogResponse(
        post=ui_post,
        content=post.body,
        applied=applied,
        public_url=f"/public/{ui_post.id}",
    )


@router.get("/board", response_model=BoardOut)
async def get_board_state(ctx: SessionContext = Depends(get_session_context)):
    """Current list and selection, without a refresh."""
    return get_board(ctx.user_id).snapshot()


@router.get("/posts", response_model=BoardOut)
async def list_posts(
    ctx: SessionContext = Depends(get_session_context),
    session: AsyncSession = Depends(get_db),
):
    """Reload the owner's posts (newest first) into the board."""
    board = get_board(ctx.user_id)
    await _refresh(board, PostGateway(session), ctx.user_id)
    return board.snapshot()


@router.get("/posts/{post_id}", response_model=SelectedPostOut)
async def select_post(
    post_id: str,
    ctx: SessionContext = Depends(get_session_context),
    session: AsyncSession = Depends(get_db),
):
    """Select a post and return its full content."""
    board = get_board(ctx.user_id)
    gateway = PostGateway(session)
    post = board.select(post_id)
    if post is None:
        await _refresh(board, gateway, ctx.user_id)
        post = board.select(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    content = board.cached_content(post_id)
    if content is None:
        content = await gateway.fetch_content(post_id, ctx.user_id)
    return SelectedPostOut(post=post, content=content)


@router.patch("/posts/{post_id}", response_model=SelectedPostOut)
async def save_post(
    post_id: str,
    body: UpdatePostRequest,
    ctx: SessionContext = Depends(get_session_context),
    session: AsyncSession = Depends(get_db),
):
    """Save editor state (title, content, optionally back to draft)."""
    fields = body.model_dump(exclude_none=True)
    if not fields:
        raise HTTPException(status_code=400, detail="Nothing to save")
    gateway = PostGateway(session)
    if body.status is not None:
        current = await gateway.get(post_id, ctx.user_id)
        if current is not None and current.status == PUBLISHED:
            raise HTTPException(status_code=409, detail="Post is already published")
    stored = await gateway.update(post_id, fields, user_id=ctx.user_id)
    board = get_board(ctx.user_id)
    ui_post = to_ui_post(stored)
    board.patch(post_id, content=stored.body, title=stored.title, status=stored.status)
    logger.info("post_saved", user_id=ctx.user_id, post_id=post_id)
    return SelectedPostOut(post=ui_post, content=stored.body)


@router.post("/posts/{post_id}/publish", response_model=SelectedPostOut)
async def publish_post(
    post_id: str,
    body: PublishPostRequest | None = Body(default=None),
    ctx: SessionContext = Depends(get_session_context),
    session: AsyncSession = Depends(get_db),
):
    """Mark the post published, saving title/content in the same write when given."""
    fields = body.model_dump(exclude_none=True) if body else {}
    stored = await PostGateway(session).publish(post_id, user_id=ctx.user_id, fields=fields)
    board = get_board(ctx.user_id)
    board.patch(post_id, content=stored.body if fields else None, title=stored.title, status=stored.status)
    logger.info("post_published", user_id=ctx.user_id, post_id=post_id)
    return SelectedPostOut(post=to_ui_post(stored), content=stored.body)


@router.post("/posts/{post_id}/schedule", status_code=501)
async def schedule_post(post_id: str, ctx: SessionContext = Depends(get_session_context)):
    """Scheduling has no backing operation yet."""
    raise HTTPException(status_code=501, detail="Scheduling is not available yet")
