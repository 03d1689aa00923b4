"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class PasswordResetError(ValidationError):
    """Raised when a password reset PIN is missing, wrong or expired."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when an operation collides with existing state."""

    pass


class DuplicateDelegateError(ConflictError):
    """Raised when a delegate already exists for an email and event year."""

    def __init__(self, email: str, event_year: int):
        self.email = email
        self.event_year = event_year
        super().__init__(
            f"Delegate with email {email} and event year {event_year} already exists"
        )


class AlreadyInStateError(ConflictError):
    """Raised when a transition targets the state the delegate is already in."""

    pass


class InvalidStateError(DomainError):
    """Raised when an operation is not allowed from the current state or input."""

    pass


class UnauthorizedError(DomainError):
    """Raised when credentials cannot be verified."""

    pass


class ForbiddenError(DomainError):
    """Raised when an authenticated caller lacks a required role."""

    pass
