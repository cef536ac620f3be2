"""Vote use cases."""

from .unvote import UnvoteRequest, UnvoteResponse, UnvoteUseCase
from .vote import VoteRequest, VoteResponse, VoteUseCase

__all__ = [
    "UnvoteRequest",
    "UnvoteResponse",
    "UnvoteUseCase",
    "VoteRequest",
    "VoteResponse",
    "VoteUseCase",
]
