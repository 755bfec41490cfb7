"""Project commands - transport-facing requests validated before use."""
from dataclasses import dataclass, field, replace
from typing import List, Optional

from mlhub.domain.entities.project import Project, ProjectModifiableProperty
from mlhub.domain.errors import ValidationError
from mlhub.domain.repositories.project_repository import ResourceListOption
from mlhub.domain.values import (
    Account, CoverId, ProjName, ProjType, ProtocolName, RepoType,
    ResourceDesc, TrainingPlatform,
)


@dataclass
class ProjectCreateCmd:
    owner: Optional[Account] = None
    name: Optional[ProjName] = None
    desc: Optional[ResourceDesc] = None
    type: Optional[ProjType] = None
    cover_id: Optional[CoverId] = None
    repo_type: Optional[RepoType] = None
    protocol: Optional[ProtocolName] = None
    training: Optional[TrainingPlatform] = None

    def validate(self) -> None:
        """Raise ValidationError naming the first missing field."""
        for f in ("owner", "name", "desc", "type", "cover_id",
                  "repo_type", "protocol", "training"):
            if getattr(self, f) is None:
                raise ValidationError("invalid cmd of creating project", rule=f)

    def to_project(self) -> Project:
        return Project(
            owner=self.owner,
            type=self.type,
            protocol=self.protocol,
            training=self.training,
            props=ProjectModifiableProperty(
                name=self.name,
                desc=self.desc,
                cover_id=self.cover_id,
                repo_type=self.repo_type,
            ),
        )


@dataclass
class ProjectUpdateCmd:
    """Partial update of a project's modifiable properties.

    ``None`` leaves the corresponding property unchanged.
    """
    name: Optional[ProjName] = None
    desc: Optional[ResourceDesc] = None
    cover_id: Optional[CoverId] = None
    repo_type: Optional[RepoType] = None

    def validate(self) -> None:
        if all(v is None for v in (self.name, self.desc, self.cover_id, self.repo_type)):
            raise ValidationError("invalid cmd of updating project", rule="empty")

    def to_property(self, p: Project) -> Optional[ProjectModifiableProperty]:
        """Build the properties ``p`` would have after this update.

        Returns:
            The new properties, or None if nothing would change
        """
        changes = {}
        for f in ("name", "desc", "cover_id", "repo_type"):
            v = getattr(self, f)
            if v is not None and v != getattr(p.props, f):
                changes[f] = v
        if not changes:
            return None
        return replace(p.props, tags=list(p.props.tags), **changes)


@dataclass
class ProjectForkCmd:
    """Fork ``src`` into a new project owned by ``owner``.

    Name and description default to the source project's.
    """
    src: Optional[Project] = None
    owner: Optional[Account] = None
    name: Optional[ProjName] = None
    desc: Optional[ResourceDesc] = None

    def validate(self) -> None:
        if self.src is None or self.src.is_new:
            raise ValidationError("invalid cmd of forking project", rule="src")
        if self.owner is None:
            raise ValidationError("invalid cmd of forking project", rule="owner")
        if self.owner == self.src.owner and (self.name is None or self.name == self.src.name):
            raise ValidationError("can't fork a project under the same name", rule="name")

    def to_project(self) -> Project:
        src = self.src
        return Project(
            owner=self.owner,
            type=src.type,
            protocol=src.protocol,
            training=src.training,
            props=ProjectModifiableProperty(
                name=self.name if self.name is not None else src.name,
                desc=self.desc if self.desc is not None else src.desc,
                cover_id=src.cover_id,
                repo_type=src.repo_type,
                tags=list(src.tags),
            ),
        )


@dataclass
class ResourceListCmd:
    name: str = ""
    repo_type: Optional[RepoType] = None

    def to_resource_list_option(self) -> ResourceListOption:
        return ResourceListOption(name=self.name, repo_type=self.repo_type)


@dataclass
class ResourceTagsUpdateCmd:
    to_add: List[str] = field(default_factory=list)
    to_remove: List[str] = field(default_factory=list)

    def validate(self) -> None:
        if any(not t for t in self.to_add):
            raise ValidationError("invalid cmd of updating tags", rule="to_add")
        if set(self.to_add) & set(self.to_remove):
            raise ValidationError("a tag can't be added and removed at once", rule="conflict")

    def to_new_tags(self, old: List[str]) -> List[str]:
        """Apply removals then additions, keeping first-seen order."""
        removed = set(self.to_remove)
        tags = [t for t in old if t not in removed]
        for t in self.to_add:
            if t not in tags:
                tags.append(t)
        return tags
