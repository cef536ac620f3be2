"""Auth use cases."""

from .get_current_viewer import (
    GetCurrentViewerRequest,
    GetCurrentViewerResponse,
    GetCurrentViewerUseCase,
    ViewerInfo,
)

__all__ = [
    "GetCurrentViewerRequest",
    "GetCurrentViewerResponse",
    "GetCurrentViewerUseCase",
    "ViewerInfo",
]
