"""SQLAlchemy table definitions for Senatus.

These table definitions match the schema defined in Alembic migrations.
Author snapshots are denormalized into each row; there is no users table.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# TOPICS TABLE
# ============================================================================
topics_table = Table(
    "topics",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("author_external_id", String(255), nullable=False),
    Column("author_display_name", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_topics_author_created_at",
    topics_table.c.author_external_id,
    topics_table.c.created_at.desc(),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "topic_id",
        UUID(as_uuid=True),
        ForeignKey("topics.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("text", String(1000), nullable=False),
    Column("author_external_id", String(255), nullable=False),
    Column("author_display_name", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_questions_topic_id", questions_table.c.topic_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
# The composite primary key is what makes concurrent double votes collapse
# into a single row.
votes_table = Table(
    "votes",
    metadata,
    Column(
        "question_id",
        UUID(as_uuid=True),
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voter_id", String(255), nullable=False),
    Column("voter_display_name", String(255), nullable=False, server_default=""),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("question_id", "voter_id", name="pk_votes"),
)

Index("idx_votes_voter_id", votes_table.c.voter_id)
