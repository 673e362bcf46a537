"""Error handling utilities."""

from typing import Optional


class HomeFinderError(Exception):
    """Base exception for HomeFinder backend."""
    status_code: int = 500

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(HomeFinderError):
    """Malformed or out-of-range input."""
    status_code = 400

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        """Wrap the first error of a pydantic ValidationError."""
        errors = exc.errors()
        if not errors:
            return cls("Invalid input")
        first = errors[0]
        loc = first.get("loc") or ()
        field = ".".join(str(part) for part in loc) or None
        return cls(f"Invalid input: {first.get('msg', 'validation failed')}", field=field)


class AuthenticationError(HomeFinderError):
    """Credentials missing or wrong."""
    status_code = 401


class AuthorizationError(HomeFinderError):
    """Actor does not own the entity it tries to mutate."""
    status_code = 403


class NotFoundError(HomeFinderError):
    """Referenced identifier is absent."""
    status_code = 404


class ConflictError(HomeFinderError):
    """Unique field already taken."""
    status_code = 409
