"""Vote entity.

A vote is a (question, voter) membership record. Each voter contributes
at most one vote per question; the pair is the natural key.
"""

from datetime import datetime

from pydantic import Field

from senatus.domain.model.common import DomainModel
from senatus.domain.value import QuestionId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per question (enforced by the composite primary key)
    - Created by casting, destroyed by retracting, never updated
    """

    question_id: QuestionId
    voter_id: str = Field(min_length=1, max_length=255)
    voter_display_name: str = Field(default="", max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
