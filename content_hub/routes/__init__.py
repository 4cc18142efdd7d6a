"""API route modules."""
from content_hub.routes.blog import router as blog_router
from content_hub.routes.linkedin import router as linkedin_router
from content_hub.routes.public import router as public_router
from content_hub.routes.settings import router as settings_router
from content_hub.routes.video import router as video_router

__all__ = [
    "blog_router",
    "linkedin_router",
    "public_router",
    "settings_router",
    "video_router",
]
