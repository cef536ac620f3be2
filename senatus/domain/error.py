"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (empty topic name, blank question text)."""

    pass


class InvalidReferenceError(DomainError):
    """Raised when an identifier is not syntactically valid."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"Invalid {resource} id: {identifier!r}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthenticatedError(DomainError):
    """Raised when an anonymous viewer attempts an action that needs identity."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Authentication required to {action}")


class StorageUnavailableError(DomainError):
    """Transient persistence failure.

    Safe to retry for idempotent operations (vote, unvote, reads). Creates
    must not be retried blindly since they are not idempotent.
    """

    def __init__(self, operation: str, reason: str | None = None):
        self.operation = operation
        self.reason = reason
        message = f"Storage unavailable during {operation}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
