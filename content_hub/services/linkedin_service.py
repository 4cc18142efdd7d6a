"""LinkedIn post helpers: editor counters and the publish webhook."""
import httpx

from content_hub.config import settings
from content_hub.errors import RequestFailed
from content_hub.models.schemas import LinkedInPostOut
from content_hub.utils.helpers import strip_html
from content_hub.utils.logging import get_logger

logger = get_logger(__name__)


def to_post_out(content: str) -> LinkedInPostOut:
    """Wrap generated content with the counters the editor shows (HTML tags are not counted)."""
    count = len(strip_html(content))
    return LinkedInPostOut(
        content=content,
        character_count=count,
        max_characters=settings.linkedin_max_characters,
        optimal_min=settings.linkedin_optimal_min,
        optimal_max=settings.linkedin_optimal_max,
        within_optimal=settings.linkedin_optimal_min <= count <= settings.linkedin_optimal_max,
    )


async def publish_to_linkedin(content: str) -> None:
    """Send the post as plain text to the publish webhook. No auth header."""
    if not settings.linkedin_publish_url:
        raise RequestFailed("LinkedIn publish endpoint is not configured")
    text = strip_html(content).strip()
    if not text:
        raise ValueError("post content must not be blank")
    if len(text) > settings.linkedin_max_characters:
        raise ValueError(f"post is longer than {settings.linkedin_max_characters} characters")
    try:
        async with httpx.AsyncClient(timeout=settings.generation_timeout_seconds) as client:
            resp = await client.post(settings.linkedin_publish_url, json={"linkedpost": text})
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.warning("linkedin_publish_failed", status=e.response.status_code, body=e.response.text[:500])
        raise RequestFailed("Failed to publish LinkedIn post") from e
    except httpx.HTTPError as e:
        logger.warning("linkedin_publish_failed", error=str(e))
        raise RequestFailed("Failed to publish LinkedIn post") from e
    logger.info("linkedin_published", characters=len(text))
