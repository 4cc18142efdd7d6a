"""Pydantic schemas for API and flow state."""
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator

PostStatus = Literal["draft", "published", "scheduled"]


def _not_blank(value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError("topic must not be blank")
    return value


Topic = Annotated[str, AfterValidator(_not_blank)]


# ----- Generation -----
class GenerateBlogRequest(BaseModel):
    """Request body for POST /blog/generate."""

    topic: Topic = Field(description="e.g. 'SaaS pricing strategies in 2025'")


class PartialResult(BaseModel):
    """What the blog generation endpoint returns: a title and status, usually no id."""

    model_config = ConfigDict(extra="ignore")

    title: str
    status: PostStatus = "draft"
    id: str | None = Field(default=None, description="Row id, when the endpoint supplies one")

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> Any:
        return value or "draft"

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        return str(value) if value not in (None, "") else None


class GenerateLinkedInRequest(BaseModel):
    """Request body for POST /linkedin/generate. Unset fields fall back to configured defaults."""

    topic: Topic
    length: str | None = Field(default=None, description="e.g. short | medium | long")
    additional_instructions: str | None = None


class LinkedInPostOut(BaseModel):
    """Generated LinkedIn post with editor counters."""

    content: str
    character_count: int
    max_characters: int
    optimal_min: int
    optimal_max: int
    within_optimal: bool


class LinkedInPublishRequest(BaseModel):
    content: str = Field(description="Post body; HTML is stripped before sending")


class VideoScriptRequest(BaseModel):
    prompt: str = Field(min_length=1, description="Idea for the script")


class VideoScriptOut(BaseModel):
    script: str


class VideoGenerateRequest(BaseModel):
    script: str = Field(min_length=1)


class VideoGenerateOut(BaseModel):
    message: str


# ----- Posts -----
class PersistedPost(BaseModel):
    """Row of blog_posts as the dashboard sees it."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    content: str | None = None
    html_content: str | None = None
    status: PostStatus = "draft"
    views: int | None = 0
    created_at: datetime | None = None

    @field_validator("status", mode="before")
    @classmethod
    def _default_status(cls, value: Any) -> Any:
        return value or "draft"

    @property
    def body(self) -> str:
        """Full content, whichever column holds it."""
        return self.html_content or self.content or ""


class UIPost(BaseModel):
    """List entry on the dashboard."""

    id: str
    title: str
    status: PostStatus = "draft"
    views: int = 0
    date: str = ""


class UpdatePostRequest(BaseModel):
    """Request body for PATCH /blog/posts/{id} (editor save)."""

    title: str | None = None
    content: str | None = None
    status: Literal["draft"] | None = Field(default=None, description="Only 'draft' can be set directly")


class PublishPostRequest(BaseModel):
    """Optional editor state saved together with the publish."""

    title: str | None = None
    content: str | None = None


class SelectedPostOut(BaseModel):
    """Selected post with its full content."""

    post: UIPost
    content: str


class BoardOut(BaseModel):
    """Current board: ordered posts and the selected id."""

    posts: list[UIPost]
    selected_id: str | None = None


class GenerateBlogResponse(BaseModel):
    status: str = Field(default="ready")
    message: str = Field(default="Blog generated successfully!")
    post: UIPost
    content: str
    applied: bool = Field(default=True, description="False when a newer generation superseded this one")
    public_url: str


class PublicPostOut(BaseModel):
    id: str
    title: str
    status: str


class PublicPostDetail(PublicPostOut):
    content: str
    created_at: datetime | None = None


# ----- Settings -----
class ContentDNA(BaseModel):
    """Onboarding answers; mapped onto onboarding.question1..question5."""

    product_service: str = ""
    ideal_customers: str = ""
    problem_solved: str = ""
    unique_style: str = ""
    post_platforms: str = ""
