"""Domain models for Senatus."""

from senatus.domain.model.question import Question, RankedQuestion
from senatus.domain.model.topic import Topic
from senatus.domain.model.vote import Vote

__all__ = [
    "Topic",
    "Question",
    "RankedQuestion",
    "Vote",
]
