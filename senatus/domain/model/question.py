"""Question entity and its ranked display form."""

from datetime import datetime

from pydantic import Field, field_validator

from senatus.domain.model.common import DomainModel
from senatus.domain.value import QuestionId, TopicId, User


class Question(DomainModel):
    """Question posted under a topic.

    Immutable once created. Vote aggregates are not stored here; see
    RankedQuestion.
    """

    id: QuestionId
    topic_id: TopicId
    text: str = Field(min_length=1, max_length=1000)
    author: User
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("text", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Store question text without surrounding whitespace."""
        return v.strip() if isinstance(v, str) else v


class RankedQuestion(Question):
    """Question with display-time vote aggregates for one viewer."""

    vote_count: int = Field(default=0, ge=0)
    viewer_can_vote: bool = False

    @classmethod
    def from_question(
        cls, question: Question, vote_count: int, viewer_can_vote: bool
    ) -> "RankedQuestion":
        """Attach vote aggregates to a stored question.

        Only the stored fields are copied, so re-ranking a RankedQuestion
        replaces its previous aggregates.
        """
        return cls(
            **question.model_dump(include=set(Question.model_fields)),
            vote_count=vote_count,
            viewer_can_vote=viewer_can_vote,
        )
