"""Domain error to HTTP status mapping."""

from fastapi import HTTPException, status

from senatus.domain.error import (
    DomainError,
    InvalidReferenceError,
    NotAuthenticatedError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (InvalidReferenceError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (NotAuthenticatedError, status.HTTP_401_UNAUTHORIZED),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def to_http_error(error: DomainError) -> HTTPException:
    """Translate a domain error into the HTTPException a route should raise."""
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )
