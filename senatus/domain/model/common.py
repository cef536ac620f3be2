"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic base for topics, questions and votes.

    Entities are created once and never updated in place; a changed view
    (such as a ranked question) is a new model instance.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
