"""initial showcase schema

Revision ID: 20261019000000
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "20261019000000"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "team_members",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("role", sa.String(length=100), nullable=True),
        sa.Column("avatar_url", sa.String(length=500), nullable=True),
        sa.Column("intro", sa.Text(), nullable=True),
        sa.Column("work_detail", sa.Text(), nullable=True),
        sa.Column("group_type", sa.String(length=50), nullable=False),
    )
    op.create_index("ix_team_members_id", "team_members", ["id"])
    op.create_index("ix_team_members_group_type", "team_members", ["group_type"])

    op.create_table(
        "team_posts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("media_url", sa.String(length=500), nullable=True),
        sa.Column("media_type", sa.String(length=10), nullable=False, server_default="image"),
        sa.Column("group_type", sa.String(length=50), nullable=False),
    )
    op.create_index("ix_team_posts_id", "team_posts", ["id"])
    op.create_index("ix_team_posts_group_type", "team_posts", ["group_type"])

    op.create_table(
        "gallery",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("image_url", sa.String(length=500), nullable=False),
        sa.Column("group_name", sa.String(length=50), nullable=False),
    )
    op.create_index("ix_gallery_id", "gallery", ["id"])
    op.create_index("ix_gallery_group_name", "gallery", ["group_name"])

    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("post_id", sa.Integer(), sa.ForeignKey("team_posts.id"), nullable=True),
        sa.Column("member_id", sa.Integer(), sa.ForeignKey("team_members.id"), nullable=True),
        sa.Column("gallery_group", sa.String(length=50), nullable=True),
        sa.Column("user_name", sa.String(length=100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_comments_id", "comments", ["id"])
    op.create_index("ix_comments_post_id", "comments", ["post_id"])
    op.create_index("ix_comments_member_id", "comments", ["member_id"])
    op.create_index("ix_comments_gallery_group", "comments", ["gallery_group"])
    op.create_index("ix_comments_created_at", "comments", ["created_at"])

    op.create_table(
        "ratings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("target_id", sa.String(length=64), nullable=False),
        sa.Column("target_type", sa.String(length=20), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_ratings_id", "ratings", ["id"])
    op.create_index("ix_ratings_created_at", "ratings", ["created_at"])
    op.create_index("ix_ratings_target", "ratings", ["target_type", "target_id"])


def downgrade() -> None:
    op.drop_index("ix_ratings_target", table_name="ratings")
    op.drop_index("ix_ratings_created_at", table_name="ratings")
    op.drop_index("ix_ratings_id", table_name="ratings")
    op.drop_table("ratings")

    op.drop_index("ix_comments_created_at", table_name="comments")
    op.drop_index("ix_comments_gallery_group", table_name="comments")
    op.drop_index("ix_comments_member_id", table_name="comments")
    op.drop_index("ix_comments_post_id", table_name="comments")
    op.drop_index("ix_comments_id", table_name="comments")
    op.drop_table("comments")

    op.drop_index("ix_gallery_group_name", table_name="gallery")
    op.drop_index("ix_gallery_id", table_name="gallery")
    op.drop_table("gallery")

    op.drop_index("ix_team_posts_group_type", table_name="team_posts")
    op.drop_index("ix_team_posts_id", table_name="team_posts")
    op.drop_table("team_posts")

    op.drop_index("ix_team_members_group_type", table_name="team_members")
    op.drop_index("ix_team_members_id", table_name="team_members")
    op.drop_table("team_members")
