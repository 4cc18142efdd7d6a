"""LangGraph state schema for the blog generation flow."""
from typing import Any, TypedDict


class BlogFlowState(TypedDict, total=False):
    """State passed between nodes. All keys optional for partial updates."""

    # Injected by API
    ctx: Any  # SessionContext
    session: Any  # AsyncSession
    topic: str

    # Generation node
    partial: Any  # PartialResult

    # Reconcile node
    post: Any  # PersistedPost
