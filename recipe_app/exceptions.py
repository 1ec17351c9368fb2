"""Typed failures raised by the service layer."""


class RecipeAppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundException(RecipeAppError):
    """Lookup by identity found nothing."""


class ValidationException(RecipeAppError):
    """Input command rejected before reaching the store."""
