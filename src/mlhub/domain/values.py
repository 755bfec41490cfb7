"""Validated value types - the only way raw strings enter the domain.

Every value is an immutable wrapper around a string. Construction validates
the raw input and raises :class:`InvalidValue` on failure, so a value that
exists is always legal. ``value`` (or ``str()``) returns the canonical
string, which is also what the persistence layer stores.
"""
import re
from dataclasses import dataclass
from typing import ClassVar, FrozenSet, Optional, Pattern

from mlhub.domain.errors import InvalidValue


@dataclass(frozen=True)
class StringValue:
    """Base for string value types.

    Subclasses tune validation through class attributes instead of
    overriding ``__post_init__``.

    Attributes:
        value: Canonical string representation
    """
    value: str

    kind: ClassVar[str] = "value"
    min_length: ClassVar[int] = 1
    max_length: ClassVar[Optional[int]] = None
    pattern: ClassVar[Optional[Pattern]] = None
    choices: ClassVar[FrozenSet[str]] = frozenset()

    def __post_init__(self):
        """Validate the raw string."""
        v = self.value
        if not isinstance(v, str):
            raise InvalidValue(f"invalid {self.kind}: expected a string")
        if len(v) < self.min_length:
            raise InvalidValue(f"invalid {self.kind}: too short")
        if self.max_length is not None and len(v) > self.max_length:
            raise InvalidValue(f"invalid {self.kind}: longer than {self.max_length}")
        if self.choices and v not in self.choices:
            raise InvalidValue(f"invalid {self.kind}: {v!r} is not one of {sorted(self.choices)}")
        if self.pattern is not None and v and not self.pattern.fullmatch(v):
            raise InvalidValue(f"invalid {self.kind}: {v!r}")
        self._check(v)

    def _check(self, v: str) -> None:
        """Extra rule hook for subclasses."""

    def __str__(self) -> str:
        return self.value


class Account(StringValue):
    kind = "account"
    min_length = 3
    max_length = 40
    pattern = re.compile(r"[A-Za-z][A-Za-z0-9_-]*")


class ProjName(StringValue):
    kind = "project name"
    max_length = 50
    pattern = re.compile(r"[A-Za-z0-9_.-]+")


class ResourceDesc(StringValue):
    kind = "resource desc"
    min_length = 0
    max_length = 200


class ProjType(StringValue):
    kind = "project type"
    choices = frozenset({"cv", "nlp", "audio", "multimodal", "others"})


class CoverId(StringValue):
    kind = "cover id"
    max_length = 9
    pattern = re.compile(r"[0-9]+")


class RepoType(StringValue):
    kind = "repo type"
    choices = frozenset({"public", "private", "online"})

    @property
    def is_private(self) -> bool:
        return self.value == "private"


class ProtocolName(StringValue):
    kind = "protocol"
    choices = frozenset({"apache-2.0", "mit", "gpl-3.0", "bsd-3-clause", "cc-by-4.0", "other"})


class TrainingPlatform(StringValue):
    kind = "training platform"
    choices = frozenset({"modelarts", "local"})


class ComputeType(StringValue):
    kind = "compute type"
    choices = frozenset({"cpu", "gpu", "npu"})


class ComputeFlavor(StringValue):
    kind = "compute flavor"
    max_length = 100
    pattern = re.compile(r"\S+")


class ComputeVersion(StringValue):
    kind = "compute version"
    max_length = 100
    pattern = re.compile(r"\S+")


class TrainingName(StringValue):
    kind = "training name"
    max_length = 50
    pattern = re.compile(r"[A-Za-z0-9_-]+")


class TrainingDesc(StringValue):
    kind = "training desc"
    min_length = 0
    max_length = 200


class Directory(StringValue):
    kind = "directory"
    max_length = 255

    def _check(self, v: str) -> None:
        if ".." in v.split("/"):
            raise InvalidValue(f"invalid {self.kind}: parent references are not allowed")


class FilePath(Directory):
    kind = "file path"

    def _check(self, v: str) -> None:
        super()._check(v)
        if v.endswith("/"):
            raise InvalidValue(f"invalid {self.kind}: must name a file")


class ResourceType(StringValue):
    kind = "resource type"
    choices = frozenset({"project", "model", "dataset"})


class CustomizedKey(StringValue):
    kind = "key"
    max_length = 100
    pattern = re.compile(r"[A-Za-z0-9_.-]+")


class CustomizedValue(StringValue):
    kind = "value"
    min_length = 0
    max_length = 1000


RESOURCE_TYPE_PROJECT = ResourceType("project")
RESOURCE_TYPE_MODEL = ResourceType("model")
RESOURCE_TYPE_DATASET = ResourceType("dataset")


def new_account(v: str) -> Account:
    return Account(v)


def new_proj_name(v: str) -> ProjName:
    return ProjName(v)


def new_resource_desc(v: str) -> ResourceDesc:
    return ResourceDesc(v)


def new_proj_type(v: str) -> ProjType:
    return ProjType(v)


def new_cover_id(v: str) -> CoverId:
    return CoverId(v)


def new_repo_type(v: str) -> RepoType:
    return RepoType(v)


def new_protocol_name(v: str) -> ProtocolName:
    return ProtocolName(v)


def new_training_platform(v: str) -> TrainingPlatform:
    return TrainingPlatform(v)


def new_compute_type(v: str) -> ComputeType:
    return ComputeType(v)


def new_compute_flavor(v: str) -> ComputeFlavor:
    return ComputeFlavor(v)


def new_compute_version(v: str) -> ComputeVersion:
    return ComputeVersion(v)


def new_training_name(v: str) -> TrainingName:
    return TrainingName(v)


def new_training_desc(v: str) -> Optional[TrainingDesc]:
    """Empty descriptions are stored as absent."""
    if not v:
        return None
    return TrainingDesc(v)


def new_directory(v: str) -> Directory:
    return Directory(v)


def new_file_path(v: str) -> FilePath:
    return FilePath(v)


def new_resource_type(v: str) -> ResourceType:
    return ResourceType(v)


def new_customized_key(v: str) -> CustomizedKey:
    return CustomizedKey(v)


def new_customized_value(v: str) -> Optional[CustomizedValue]:
    if not v:
        return None
    return CustomizedValue(v)
