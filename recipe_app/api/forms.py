"""Helpers shared by the form-handling routes."""

from pydantic import ValidationError


def format_validation_errors(error: ValidationError) -> list[str]:
    """Flatten a pydantic error into ``"field: message"`` lines for the form view."""
    return [
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    ]
