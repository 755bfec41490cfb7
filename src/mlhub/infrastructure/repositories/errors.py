"""Translation of mapper errors into domain errors."""
from contextlib import contextmanager
from typing import Iterator

from mlhub.domain.errors import (
    ConcurrentModification, DuplicateCreating, NotFound,
)
from mlhub.infrastructure.persistence.errors import (
    DocExistsError, DocNotExistsError, MapperError, VersionMismatchError,
)


def convert_error(e: Exception) -> Exception:
    """Map a storage error onto the domain taxonomy; unknown errors pass
    through unchanged."""
    if isinstance(e, DocNotExistsError):
        return NotFound(str(e))
    if isinstance(e, DocExistsError):
        return DuplicateCreating(str(e))
    if isinstance(e, VersionMismatchError):
        return ConcurrentModification(str(e))
    return e


@contextmanager
def converted_errors() -> Iterator[None]:
    """Raise mapper errors from the block as domain errors.

    A converted error is chained to the mapper error; an unknown mapper
    error is re-raised as is.
    """
    try:
        yield
    except MapperError as e:
        converted = convert_error(e)
        if converted is e:
            raise
        raise converted from e
