"""Blog flow: the generate node asks the webhook for a post, the reconcile node finds the row it saved."""


def create_blog_graph():
    # graph imports the agents, which import workflow.state; defer it past package init
    from content_hub.workflow.graph import create_blog_graph as build

    return build()


__all__ = ["create_blog_graph"]
