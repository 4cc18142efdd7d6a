"""Generation node: call the blog endpoint for the topic."""
from content_hub.services import generation_service
from content_hub.workflow.state import BlogFlowState


async def blog_generator_agent(state: BlogFlowState) -> dict:
    """Returns the partial result (title + status)."""
    partial = await generation_service.generate_blog(state.get("ctx"), state.get("topic") or "")
    return {"partial": partial}
