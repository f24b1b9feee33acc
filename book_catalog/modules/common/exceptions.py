"""Domain exception classes for book catalog errors."""


class DomainError(Exception):
    """Base class for all domain-specific errors."""

    pass


class ResourceNotFoundError(DomainError):
    """Raised when a requested resource cannot be found."""

    pass


class ValidationError(DomainError):
    """Raised when data validation fails."""

    pass


class BookNotFoundError(ResourceNotFoundError):
    """Raised when the catalog has no book for the requested id."""

    pass
