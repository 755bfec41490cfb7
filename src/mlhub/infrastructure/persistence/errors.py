"""Errors raised by document mappers."""


class MapperError(Exception):
    """Base class for storage-level failures."""


class DocNotExistsError(MapperError):
    pass


class DocExistsError(MapperError):
    pass


class VersionMismatchError(MapperError):
    """The stored document's version differs from the caller's."""
