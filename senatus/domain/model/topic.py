"""Topic aggregate root.

Topics are the discussion containers that questions are posted under.
"""

from datetime import datetime

from pydantic import Field, field_validator

from senatus.domain.model.common import DomainModel
from senatus.domain.value import TopicId, User


class Topic(DomainModel):
    """Topic aggregate root.

    Created once and never mutated or deleted.
    """

    id: TopicId
    name: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    author: User
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Store names without surrounding whitespace."""
        return v.strip() if isinstance(v, str) else v
