"""Generation requestor: blog and LinkedIn post generation webhooks."""
from typing import Any

import httpx
from pydantic import ValidationError

from content_hub.config import settings
from content_hub.errors import RequestFailed
from content_hub.models.schemas import PartialResult
from content_hub.services.auth_service import SessionContext, require_session
from content_hub.utils.helpers import safe_json_loads
from content_hub.utils.logging import get_logger

logger = get_logger(__name__)


async def _post_json(url: str, ctx: SessionContext, payload: dict[str, Any], fallback_message: str) -> dict[str, Any]:
    """POST with the session's auth headers. Any failure becomes RequestFailed; no retry."""
    try:
        async with httpx.AsyncClient(timeout=settings.generation_timeout_seconds) as client:
            resp = await client.post(url, json=payload, headers=ctx.auth_headers())
    except httpx.HTTPError as e:
        logger.warning("generation_request_error", url=url, error=str(e))
        raise RequestFailed(f"{fallback_message}: {e}") from e
    if not resp.is_success:
        err = safe_json_loads(resp.text) or {}
        logger.warning("generation_request_rejected", url=url, status=resp.status_code, body=resp.text[:500])
        raise RequestFailed(err.get("message") or fallback_message)
    data = safe_json_loads(resp.text)
    if data is None:
        raise RequestFailed(f"{fallback_message}: response was not a JSON object")
    return data


def parse_blog_response(data: dict[str, Any]) -> PartialResult:
    """Pull the partial blog out of `{blog: {...}}` or `{blog: [{...}]}`."""
    blog = data.get("blog")
    if isinstance(blog, list):
        blog = blog[0] if blog else None
    if not isinstance(blog, dict) or not str(blog.get("title") or "").strip():
        raise RequestFailed("API response did not contain a blog with a title.")
    try:
        return PartialResult.model_validate(blog)
    except ValidationError as e:
        raise RequestFailed(f"API returned an unusable blog: {e.errors()[0]['msg']}") from e


async def generate_blog(ctx: SessionContext | None, topic: str) -> PartialResult:
    """Ask the blog endpoint to generate and save a post for `topic`."""
    ctx = require_session(ctx)
    topic = (topic or "").strip()
    if not topic:
        raise ValueError("topic must not be blank")
    logger.info("blog_generation_requested", user_id=ctx.user_id, topic=topic)
    data = await _post_json(
        settings.blog_generation_url,
        ctx,
        {"topic": topic},
        "API failed to generate blog",
    )
    partial = parse_blog_response(data)
    logger.info("blog_generation_done", user_id=ctx.user_id, title=partial.title, status=partial.status)
    return partial


async def generate_linkedin_post(
    ctx: SessionContext | None,
    topic: str,
    length: str | None = None,
    additional_instructions: str | None = None,
) -> str:
    """Generate LinkedIn post content for `topic`. Returns the post body (may contain HTML)."""
    ctx = require_session(ctx)
    topic = (topic or "").strip()
    if not topic:
        raise ValueError("topic must not be blank")
    data = await _post_json(
        settings.post_generation_url,
        ctx,
        {
            "topic": topic,
            "length": length or settings.linkedin_post_length,
            "additional_instructions": (
                additional_instructions
                if additional_instructions is not None
                else settings.linkedin_additional_instructions
            ),
        },
        "API failed to generate LinkedIn post",
    )
    content = data.get("content")
    if not isinstance(content, str) or not content:
        raise RequestFailed("API response did not contain post content.")
    return content
