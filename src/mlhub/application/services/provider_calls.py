"""Wrapping of calls to external platforms."""
from typing import Callable, TypeVar

from mlhub.domain.errors import ExternalProviderError

T = TypeVar("T")


def call_provider(action: str, fn: Callable[..., T], *args) -> T:
    """Run an external call, turning its failure into ExternalProviderError."""
    try:
        return fn(*args)
    except ExternalProviderError:
        raise
    except Exception as e:
        raise ExternalProviderError(f"failed to {action}: {e}") from e
