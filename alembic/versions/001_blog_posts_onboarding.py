"""Initial schema: blog_posts, onboarding.

Revision ID: 001
Revises:
Create Date: 2025-06-14

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "blog_posts",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("html_content", sa.Text(), nullable=True),
        sa.Column("status", sa.String(20), nullable=True),
        sa.Column("views", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_blog_posts_user_id", "blog_posts", ["user_id"])
    op.create_table(
        "onboarding",
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("question1", sa.Text(), nullable=True),
        sa.Column("question2", sa.Text(), nullable=True),
        sa.Column("question3", sa.Text(), nullable=True),
        sa.Column("question4", sa.Text(), nullable=True),
        sa.Column("question5", sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint("user_id"),
    )


def downgrade() -> None:
    op.drop_table("onboarding")
    op.drop_index("ix_blog_posts_user_id", table_name="blog_posts")
    op.drop_table("blog_posts")
