"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for malformed input before any store access.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a concurrent write violated a uniqueness constraint.

    Safe to retry once; the retried request sees the committed vote.
    """

    pass


class TransientStoreError(DomainError):
    """Raised when the persistence layer is unreachable or timed out."""

    pass
