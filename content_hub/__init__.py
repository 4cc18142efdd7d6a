"""Content hub: blog, LinkedIn and video generation dashboard API."""
