"""Custom domain exceptions for the application."""

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
VALIDATION_ERROR = "VALIDATION_ERROR"
UNRESOLVED_PROFILE = "UNRESOLVED_PROFILE"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DomainValidationError(DomainError):
    """Raised when request parameters break a business rule (e.g. incompatible search filters)."""

    pass


class UnresolvedProfileError(DomainError):
    """Raised when some installed languages have no quality profile after every fallback."""

    def __init__(self, language_keys, project_key: str | None = None):
        self.language_keys = sorted(language_keys)
        self.project_key = project_key
        message = "No quality profile can be found on language(s) '{}'".format(
            ", ".join(self.language_keys)
        )
        if project_key is not None:
            message += f" for project '{project_key}'"
        super().__init__(message)
