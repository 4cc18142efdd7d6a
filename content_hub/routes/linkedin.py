"""LinkedIn post generation and publish."""
from fastapi import APIRouter, Depends, HTTPException

from content_hub.models.schemas import GenerateLinkedInRequest, LinkedInPostOut, LinkedInPublishRequest
from content_hub.routes.deps import get_optional_session, get_session_context
from content_hub.services import generation_service
from content_hub.services.auth_service import SessionContext
from content_hub.services.linkedin_service import publish_to_linkedin, to_post_out

router = APIRouter(prefix="/linkedin", tags=["linkedin"])


@router.post("/generate", response_model=LinkedInPostOut)
async def generate_post(
    body: GenerateLinkedInRequest,
    ctx: SessionContext | None = Depends(get_optional_session),
):
    """Generate a LinkedIn post for the topic and return it with editor counters."""
    content = await generation_service.generate_linkedin_post(
        ctx,
        body.topic,
        length=body.length,
        additional_instructions=body.additional_instructions,
    )
    return to_post_out(content)


@router.post("/publish")
async def publish_post(
    body: LinkedInPublishRequest,
    ctx: SessionContext = Depends(get_session_context),
):
    """Send the (edited) post to LinkedIn as plain text."""
    try:
        await publish_to_linkedin(body.content)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return {"status": "published"}
