"""Reconcile node: look up the row the generation backend wrote."""
from content_hub.services.post_gateway import PostGateway
from content_hub.services.reconciler import ResultReconciler
from content_hub.workflow.state import BlogFlowState


async def reconcile_agent(state: BlogFlowState) -> dict:
    """Requires state['session'] and state['partial']."""
    reconciler = ResultReconciler(PostGateway(state["session"]))
    post = await reconciler.reconcile(state.get("ctx"), state["partial"])
    return {"post": post}
