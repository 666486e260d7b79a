"""initial_schema

Create the schema for Event Talk:
- Users (read-only here, shown as comment authors)
- Events (read-only here, the things being commented on)
- Comments (flat, with a like counter)

Revision ID: 3c1d9e7a4b20
Revises:
Create Date: 2024-05-01 12:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1d9e7a4b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid() is built in from PostgreSQL 13, pgcrypto covers older servers
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # EVENTS table
    # ========================================================================
    op.create_table(
        "events",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("schedule", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # COMMENTS table (no foreign keys: references are not verified)
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(content) BETWEEN 1 AND 500", name="content_length_range"
        ),
        sa.CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    )
    op.create_index(
        "idx_comments_created_at",
        "comments",
        [sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_comments_event_id_created_at",
        "comments",
        ["event_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_comments_author_id", "comments", ["author_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_author_id", table_name="comments")
    op.drop_index("idx_comments_event_id_created_at", table_name="comments")
    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_table("comments")
    op.drop_table("events")
    op.drop_table("users")
