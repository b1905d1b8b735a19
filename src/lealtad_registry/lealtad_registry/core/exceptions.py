class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when form input is missing or malformed."""


class StoreError(DomainError):
    """Raised when the remote endpoint or the local store fails a request."""


class RecordNotFoundError(StoreError):
    """Raised when an operation targets an id that does not exist."""
