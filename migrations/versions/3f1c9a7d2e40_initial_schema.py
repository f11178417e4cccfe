"""initial_schema

Create the schema for the campus forum:
- Users (registered from the identity provider's principal)
- Posts (categories, denormalized reaction/comment/report counters)
- Comments (one per author per post)
- Votes (one per voter per post or comment, up or down)
- Reports (one per reporter per item, drive post suspension)

Counter-bearing rows carry a ``version`` column for optimistic updates.

Revision ID: 3f1c9a7d2e40
Revises:
Create Date: 2026-10-19 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a7d2e40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUM_TYPES = {
    "content_type": ("post", "comment"),
    "vote_type": ("up", "down"),
    "post_category": (
        "Academics",
        "Campus Life",
        "Events",
        "Question",
        "Complaint",
        "Discussion",
        "Other",
    ),
    "report_category": (
        "hate-speech",
        "religious-extremism",
        "sexual-content",
        "bullying-harassment",
        "spam",
        "misinformation",
        "other",
    ),
    "report_status": ("pending", "reviewed", "resolved"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUM_TYPES[name], name=name, create_type=False)


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), nullable=False),  # Identity provider ID
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_banned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("banned_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_email", "users", [sa.text("lower(email)")])

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("author_display_name", sa.String(255), nullable=False),
        sa.Column("author_avatar_url", sa.Text(), nullable=True),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("text", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("category", _enum("post_category"), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("report_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "is_suspended", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        # Business rule: must have text or an image
        sa.CheckConstraint(
            "(text IS NOT NULL OR image_url IS NOT NULL)",
            name="text_or_image_required",
        ),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0 AND comments_count >= 0 AND report_count >= 0",
            name="post_counters_non_negative",
        ),
    )
    op.create_index("idx_posts_created_at", "posts", [sa.text("created_at DESC")])
    op.create_index("idx_posts_author_id", "posts", ["author_id"])
    op.create_index("idx_posts_is_suspended", "posts", ["is_suspended"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),  # Derived from (post, author)
        sa.Column("post_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.String(255), nullable=False),
        sa.Column("author_display_name", sa.String(255), nullable=False),
        sa.Column("author_avatar_url", sa.Text(), nullable=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("edited_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "author_id", name="unique_comment_per_author"),
        sa.CheckConstraint(
            "char_length(text) BETWEEN 1 AND 2000", name="comment_text_length"
        ),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0", name="comment_counters_non_negative"
        ),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("votable_type", _enum("content_type"), nullable=False),
        sa.Column("votable_id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.String(255), nullable=False),
        sa.Column("vote_type", _enum("vote_type"), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["voter_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(
            "votable_type", "votable_id", "voter_id", name="unique_vote"
        ),
    )
    op.create_index("idx_votes_voter_id", "votes", ["voter_id"])

    # ========================================================================
    # REPORTS table
    # ========================================================================
    op.create_table(
        "reports",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("content_id", sa.UUID(), nullable=False),
        sa.Column("content_type", _enum("content_type"), nullable=False),
        sa.Column("content_owner_id", sa.String(255), nullable=False),
        sa.Column("reporter_id", sa.String(255), nullable=False),
        sa.Column("category", _enum("report_category"), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
        sa.Column(
            "status",
            _enum("report_status"),
            nullable=False,
            server_default="pending",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["reporter_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("content_id", "reporter_id", name="unique_report"),
        sa.CheckConstraint("reporter_id <> content_owner_id", name="no_self_report"),
    )
    op.create_index("idx_reports_created_at", "reports", [sa.text("created_at DESC")])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("reports")
    op.drop_table("votes")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("users")

    # Drop ENUM types
    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")
