class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class PersistenceError(DomainError):
    """Raised when the underlying record store fails a read or write."""


class ScheduleLookupError(PersistenceError):
    """Raised when a worker's schedule could not be resolved because of a store failure."""
