class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StorageError(Exception):
    """Raised when the attendance table cannot be read or written.

    Callers must not assume any partial write happened.
    """


class DuplicateRecordError(StorageError):
    """Raised when an insert collides with the (employee, date) unique key."""


class SerializationError(Exception):
    """Raised when a report could not be written to its export file."""
