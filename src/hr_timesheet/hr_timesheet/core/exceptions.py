class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an operation targets an identity that does not exist."""


class ConflictError(DomainError):
    """Raised when a uniqueness constraint is violated."""


class StorageError(DomainError):
    """Raised when the underlying persistence layer fails.

    The driver message is kept as the exception text so it can be passed
    through to the caller.
    """
