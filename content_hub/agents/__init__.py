"""LangGraph nodes of the blog generation flow."""
from content_hub.agents.blog_generator import blog_generator_agent
from content_hub.agents.reconcile_agent import reconcile_agent

__all__ = ["blog_generator_agent", "reconcile_agent"]
