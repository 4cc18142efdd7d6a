"""Video script and video generation."""
from fastapi import APIRouter, Depends

from content_hub.models.schemas import VideoGenerateOut, VideoGenerateRequest, VideoScriptOut, VideoScriptRequest
from content_hub.routes.deps import get_session_context
from content_hub.services import video_service
from content_hub.services.auth_service import SessionContext

router = APIRouter(prefix="/video", tags=["video"])


@router.post("/script", response_model=VideoScriptOut)
async def generate_script(body: VideoScriptRequest, ctx: SessionContext = Depends(get_session_context)):
    return VideoScriptOut(script=await video_service.generate_script(body.prompt))


@router.post("/generate", response_model=VideoGenerateOut)
async def generate_video(body: VideoGenerateRequest, ctx: SessionContext = Depends(get_session_context)):
    """Send the script to the video generator."""
    return VideoGenerateOut(message=await video_service.generate_video(body.script))
