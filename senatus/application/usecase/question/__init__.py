"""Question use cases."""

from .create_question import (
    CreateQuestionRequest,
    CreateQuestionResponse,
    CreateQuestionUseCase,
)

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionResponse",
    "CreateQuestionUseCase",
]
