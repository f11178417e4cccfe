"""SQLAlchemy table definitions for the campus forum.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import ENUM, TIMESTAMP, UUID

from campus.domain.value import ContentType, PostCategory, ReportCategory, ReportStatus

# Metadata object for all tables
metadata = MetaData()

content_type_enum = ENUM(
    *[t.value for t in ContentType], name="content_type", create_type=False
)

# ============================================================================
# USERS TABLE (registered from the identity provider's principal)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),  # Identity provider's user ID
    Column("display_name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column("is_banned", Boolean, nullable=False, server_default="false"),
    Column("banned_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", func.lower(users_table.c.email))

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "author_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_display_name", String(255), nullable=False),  # Denormalized
    Column("author_avatar_url", Text, nullable=True),  # Denormalized
    Column("title", String(300), nullable=False),
    Column("text", Text, nullable=True),
    Column("image_url", Text, nullable=True),
    Column(
        "category",
        ENUM(*[c.value for c in PostCategory], name="post_category", create_type=False),
        nullable=False,
    ),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column("report_count", Integer, nullable=False, server_default="0"),
    Column("is_suspended", Boolean, nullable=False, server_default="false"),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "(text IS NOT NULL OR image_url IS NOT NULL)",
        name="text_or_image_required",
    ),
    CheckConstraint(
        "upvotes >= 0 AND downvotes >= 0 AND comments_count >= 0 AND report_count >= 0",
        name="post_counters_non_negative",
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_is_suspended", posts_table.c.is_suspended)

# ============================================================================
# COMMENTS TABLE (one row per author per post)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),  # Derived from (post_id, author_id)
    Column("post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "author_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_display_name", String(255), nullable=False),  # Denormalized
    Column("author_avatar_url", Text, nullable=True),  # Denormalized
    Column("text", Text, nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("edited_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("post_id", "author_id", name="unique_comment_per_author"),
    CheckConstraint(
        "char_length(text) BETWEEN 1 AND 2000", name="comment_text_length"
    ),
    CheckConstraint(
        "upvotes >= 0 AND downvotes >= 0", name="comment_counters_non_negative"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# VOTES TABLE (one row per voter per item)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("votable_type", content_type_enum, nullable=False),
    Column("votable_id", UUID, nullable=False),
    Column(
        "voter_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "vote_type",
        ENUM("up", "down", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("votable_type", "votable_id", "voter_id", name="unique_vote"),
)

Index("idx_votes_voter_id", votes_table.c.voter_id)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "reports",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("content_id", UUID, nullable=False),  # Post or comment, kept after deletion
    Column("content_type", content_type_enum, nullable=False),
    Column("content_owner_id", String(255), nullable=False),
    Column(
        "reporter_id",
        String(255),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "category",
        ENUM(
            *[c.value for c in ReportCategory],
            name="report_category",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("reason", Text, nullable=True),
    Column(
        "status",
        ENUM(*[s.value for s in ReportStatus], name="report_status", create_type=False),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("content_id", "reporter_id", name="unique_report"),
    CheckConstraint("reporter_id <> content_owner_id", name="no_self_report"),
)

Index("idx_reports_created_at", reports_table.c.created_at.desc())
