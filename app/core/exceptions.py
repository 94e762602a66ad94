"""
Application error taxonomy.

Every error raised by stores and workflows derives from AppError; the handler
registered in app.main turns it into the response envelope with success=false.
"""


class AppError(Exception):
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    """Missing or malformed input."""
    kind = "validation"


class ConflictError(AppError):
    """Duplicate email or username."""
    kind = "conflict"


class NotFoundError(AppError):
    kind = "not_found"


class AuthenticationError(AppError):
    """Unknown email or wrong password. The message never says which."""
    kind = "authentication"


class StoreError(AppError):
    """A database operation failed."""
    kind = "store"


class ExternalServiceError(AppError):
    """Image service lookup failed. Always absorbed by the picture provider."""
    kind = "external_service"
