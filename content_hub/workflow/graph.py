"""Compiled LangGraph: generate -> reconcile -> END."""
from langgraph.graph import START, END
from langgraph.graph import StateGraph

from content_hub.workflow.state import BlogFlowState
from content_hub.agents.blog_generator import blog_generator_agent
from content_hub.agents.reconcile_agent import reconcile_agent


def create_blog_graph():
    """Build and compile the blog generation graph. Node errors propagate out of ainvoke."""
    builder = StateGraph(BlogFlowState)

    builder.add_node("generate", blog_generator_agent)
    builder.add_node("reconcile", reconcile_agent)

    builder.add_edge(START, "generate")
    builder.add_edge("generate", "reconcile")
    builder.add_edge("reconcile", END)

    return builder.compile()
