"""Unit tests for domain error to HTTP mapping."""

import pytest

from senatus.domain.error import (
    DomainError,
    InvalidReferenceError,
    NotAuthenticatedError,
    NotFoundError,
    StorageUnavailableError,
    ValidationError,
)
from senatus.interface.api.errors import to_http_error


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (ValidationError("Name must be provided"), 400),
        (InvalidReferenceError("question", "abc"), 400),
        (NotFoundError("Topic", "123"), 404),
        (NotAuthenticatedError("vote"), 401),
        (StorageUnavailableError("vote.upsert"), 503),
        (DomainError("unexpected"), 500),
    ],
)
def test_status_codes(error, status_code):
    http_error = to_http_error(error)

    assert http_error.status_code == status_code
    assert http_error.detail == str(error)
