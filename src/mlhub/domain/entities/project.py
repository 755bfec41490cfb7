"""Project aggregate - a user's model/dataset workspace."""
from dataclasses import dataclass, field
from typing import List

from mlhub.domain.values import (
    Account, CoverId, ProjName, ProjType, ProtocolName, RepoType,
    ResourceDesc, ResourceType, TrainingPlatform,
)


@dataclass(frozen=True)
class ResourceIndex:
    """Reference to a resource (model, dataset, project) owned by some user."""
    owner: Account
    id: str


@dataclass(frozen=True)
class ResourceObject:
    """A typed resource reference, used by activities."""
    type: ResourceType
    owner: Account
    id: str


@dataclass
class ProjectModifiableProperty:
    """The part of a project its owner may change after creation."""
    name: ProjName
    desc: ResourceDesc
    cover_id: CoverId
    repo_type: RepoType
    tags: List[str] = field(default_factory=list)


@dataclass
class Project:
    """Project aggregate root.

    ``id`` is assigned by the repository; an empty id means the project has
    never been saved. ``version`` is the optimistic-lock token handed back to
    the repository on every update.

    Attributes:
        owner: Account that owns the project
        type: Project category
        protocol: Licence of the project content
        training: Platform used to run trainings for this project
        props: Owner-modifiable fields (name, desc, cover, repo type, tags)
        repo_id: Identifier of the backing repository at the provider
        related_models: Models referenced by the project
        related_datasets: Datasets referenced by the project
        like_count: Number of likes
        fork_count: Number of forks made from this project
        version: Optimistic concurrency counter
        created_at: Creation time, unix seconds
        updated_at: Last update time, unix seconds
    """
    owner: Account
    type: ProjType
    protocol: ProtocolName
    training: TrainingPlatform
    props: ProjectModifiableProperty
    id: str = ""
    repo_id: str = ""
    related_models: List[ResourceIndex] = field(default_factory=list)
    related_datasets: List[ResourceIndex] = field(default_factory=list)
    like_count: int = 0
    fork_count: int = 0
    version: int = 0
    created_at: int = 0
    updated_at: int = 0

    @property
    def name(self) -> ProjName:
        return self.props.name

    @property
    def desc(self) -> ResourceDesc:
        return self.props.desc

    @property
    def cover_id(self) -> CoverId:
        return self.props.cover_id

    @property
    def repo_type(self) -> RepoType:
        return self.props.repo_type

    @property
    def tags(self) -> List[str]:
        return self.props.tags

    @property
    def is_new(self) -> bool:
        return self.id == ""

    def index(self) -> ResourceIndex:
        return ResourceIndex(owner=self.owner, id=self.id)


@dataclass
class ProjectPropertyUpdate:
    """Owner/id/version envelope for an optimistic property update."""
    owner: Account
    id: str
    version: int
    props: ProjectModifiableProperty


@dataclass
class RelatedResourceUpdate:
    """Adds or removes ``resource`` from the related set of ``project``."""
    project: ResourceIndex
    resource: ResourceIndex
