"""initial_schema

Create the schema for Senatus:
- Topics (discussion containers with an author snapshot)
- Questions (belong to one topic)
- Votes (one row per question and voter, enforced by the primary key)

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # TOPICS
    # ========================================================================
    op.create_table(
        "topics",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("author_external_id", sa.String(255), nullable=False),
        sa.Column("author_display_name", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_topics_author_created_at",
        "topics",
        ["author_external_id", sa.text("created_at DESC")],
    )

    # ========================================================================
    # QUESTIONS
    # ========================================================================
    op.create_table(
        "questions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("topic_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.String(1000), nullable=False),
        sa.Column("author_external_id", sa.String(255), nullable=False),
        sa.Column("author_display_name", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["topic_id"], ["topics.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_questions_topic_id", "questions", ["topic_id"])

    # ========================================================================
    # VOTES
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("voter_id", sa.String(255), nullable=False),
        sa.Column(
            "voter_display_name", sa.String(255), nullable=False, server_default=""
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("question_id", "voter_id", name="pk_votes"),
    )
    op.create_index("idx_votes_voter_id", "votes", ["voter_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_voter_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_questions_topic_id", table_name="questions")
    op.drop_table("questions")
    op.drop_index("idx_topics_author_created_at", table_name="topics")
    op.drop_table("topics")
