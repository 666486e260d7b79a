"""SQLAlchemy table definitions for Event Talk.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (read for comment enrichment)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("username", String(100), nullable=False),
    Column("email", String(255), nullable=True),  # Contact handle
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

# ============================================================================
# EVENTS TABLE (read for comment enrichment)
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("name", String(200), nullable=False),
    Column("schedule", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# author_id / event_id carry no foreign keys: references are not verified.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column("author_id", UUID, nullable=False),
    Column("event_id", UUID, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 500", name="content_length_range"
    ),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
)

Index("idx_comments_created_at", comments_table.c.created_at.desc())
Index(
    "idx_comments_event_id_created_at",
    comments_table.c.event_id,
    comments_table.c.created_at.desc(),
)
Index("idx_comments_author_id", comments_table.c.author_id)
