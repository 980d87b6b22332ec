class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when request input (week token, page, bucket name) is invalid."""


class NotFoundError(DomainError):
    """Raised when a requested student is not on the roster."""


class RosterUnavailableError(DomainError):
    """Raised when the roster source cannot deliver a snapshot."""
