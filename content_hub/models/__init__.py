"""SQLAlchemy and Pydantic models."""
from content_hub.models.db_models import BlogPost, Onboarding, init_db
from content_hub.models.schemas import (
    BoardOut,
    ContentDNA,
    GenerateBlogRequest,
    GenerateBlogResponse,
    GenerateLinkedInRequest,
    LinkedInPostOut,
    PartialResult,
    PersistedPost,
    UIPost,
    UpdatePostRequest,
)

__all__ = [
    "BlogPost",
    "Onboarding",
    "init_db",
    "BoardOut",
    "ContentDNA",
    "GenerateBlogRequest",
    "GenerateBlogResponse",
    "GenerateLinkedInRequest",
    "LinkedInPostOut",
    "PartialResult",
    "PersistedPost",
    "UIPost",
    "UpdatePostRequest",
]
