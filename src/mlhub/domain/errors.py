"""Domain error taxonomy shared by every layer."""
from typing import Optional


class MlhubError(Exception):
    """Base class for all errors raised by the service."""


class ValidationError(MlhubError):
    """A command failed validation before any external call was made.

    The message is the stable, caller-facing text. ``rule`` names the first
    rule that failed and is meant for logs and tests, not for end users.
    """

    def __init__(self, message: str, rule: Optional[str] = None):
        super().__init__(message)
        self.rule = rule


class InvalidValue(MlhubError, ValueError):
    """Raw input (or a stored representation) is not a legal domain value."""


class NotFound(MlhubError):
    """No aggregate matches the lookup key."""


class DuplicateCreating(MlhubError):
    """An aggregate with the same unique key already exists."""


class ConcurrentModification(MlhubError):
    """The caller's version does not match the stored version."""


class ExternalProviderError(MlhubError):
    """The repository provider or training platform rejected a request."""
