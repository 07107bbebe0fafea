"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class AccountValidationError(ValidationError):
    """Raised when an account fails attribute validation before persisting.

    Carries a stable, field-specific code (e.g. ``first_name_required``)
    that callers can surface verbatim.
    """

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AccountConflictError(DomainError):
    """Raised when a write would give two accounts the same email or external id."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Another account already has {field}={value}")


class MalformedProfileError(DomainError):
    """Raised when a provider profile payload lacks a required field."""

    def __init__(self, provider: str, field: str):
        self.provider = provider
        self.field = field
        super().__init__(f"{provider} profile is missing required field '{field}'")
