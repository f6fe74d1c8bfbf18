class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when submitted form data or a scan breaks a rule."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class NotFoundError(DomainError):
    """Raised when a referenced member, event or record does not exist."""


class DuplicateError(DomainError):
    """Raised when a unique constraint (school ID, officer email, attendance slot) is hit."""
