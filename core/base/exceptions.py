"""
Registry exception taxonomy.

- NotFoundError: an addressed resource or referenced code could not be
  resolved. Recoverable; the API layer reports it as HTTP 404.
- InvariantViolation: a programming error such as assigning an incompatible
  reference object. Never caught by the API layer.

Field-level validation failures use django.core.exceptions.ValidationError,
like the rest of the service layer.
"""


class RegistryError(Exception):
    """Base class for registry errors."""


class NotFoundError(RegistryError):
    """Raised when a person, role, sponsor or reference code cannot be resolved."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class InvariantViolation(RegistryError):
    """Raised when an object is wired to an incompatible reference."""
