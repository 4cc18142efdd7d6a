"""Database package: session and lifecycle."""
from content_hub.models.db_models import (
    BlogPost,
    Onboarding,
    create_tables,
    dispose_db,
    get_db,
    init_db,
)

__all__ = [
    "BlogPost",
    "Onboarding",
    "create_tables",
    "dispose_db",
    "get_db",
    "init_db",
]
