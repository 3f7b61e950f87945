class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an id-keyed operation targets a record that does not exist."""


class StoreError(DomainError):
    """Raised when the local record store cannot be opened or initialized."""
