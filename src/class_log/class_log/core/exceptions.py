class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class TimeParseError(ValidationError):
    """Raised when a wall-clock string is not HH:MM or HH:MM:SS."""


class NegativeIntervalError(ValidationError):
    """Raised when an interval ends before it starts."""


class NotFoundError(DomainError):
    """Raised when a referenced session (or identity) does not exist."""


class IdentityNotFoundError(NotFoundError):
    """Raised when no account is registered under the given e-mail."""


class DuplicateKeyError(DomainError):
    """Raised when a session key is already stored."""


class StoreUnavailableError(DomainError):
    """Raised when the persistence layer cannot be reached."""
