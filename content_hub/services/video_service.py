"""Video script and video generation webhooks. Their error bodies are not always JSON."""
import httpx

from content_hub.config import settings
from content_hub.errors import RequestFailed
from content_hub.utils.helpers import safe_json_loads
from content_hub.utils.logging import get_logger

logger = get_logger(__name__)

VIDEO_SENT_MESSAGE = "Successfully sent prompt for video generation!"


async def _post_webhook(url: str, payload: dict, error_keys: tuple[str, ...], fallback_message: str) -> dict:
    """POST and return the JSON body ({} when empty). On failure use the first error key present, else the raw text."""
    try:
        async with httpx.AsyncClient(timeout=settings.generation_timeout_seconds) as client:
            resp = await client.post(url, json=payload)
    except httpx.HTTPError as e:
        logger.warning("video_webhook_error", url=url, error=str(e))
        raise RequestFailed(str(e) or fallback_message) from e
    text = resp.text
    if not resp.is_success:
        err = safe_json_loads(text) or {}
        message = next((err[k] for k in error_keys if err.get(k)), None) or text
        logger.warning("video_webhook_rejected", url=url, status=resp.status_code)
        raise RequestFailed(message or fallback_message)
    if not text.strip():
        return {}
    data = safe_json_loads(text)
    if data is None:
        raise RequestFailed(f"{fallback_message}: response was not a JSON object")
    return data


async def generate_script(prompt: str) -> str:
    """Turn an idea into a video script (`{prompt}` → `{Output}`)."""
    data = await _post_webhook(
        settings.video_script_url,
        {"prompt": prompt},
        ("Output", "message"),
        "Failed to generate script.",
    )
    return data.get("Output") or ""


async def generate_video(script: str) -> str:
    """Hand a script to the video generator (`{script}` → `{message}`). Returns the status message."""
    data = await _post_webhook(
        settings.video_generation_url,
        {"script": script},
        ("message",),
        "Failed to send prompt.",
    )
    return data.get("message") or VIDEO_SENT_MESSAGE
