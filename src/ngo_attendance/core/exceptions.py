class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when a required field is empty or input data is invalid."""


class NotFoundError(DomainError):
    """Raised when an operation references an identity that does not exist."""


class PersistenceError(DomainError):
    """Raised when the key-value store cannot be read or written."""
