"""Abstract project persistence - Repository pattern for data access."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from mlhub.domain.entities.project import (
    Project, ProjectPropertyUpdate, RelatedResourceUpdate, ResourceIndex,
)
from mlhub.domain.values import Account, ProjName, RepoType


@dataclass
class ResourceListOption:
    """Filters for listing one user's resources.

    Attributes:
        name: Substring the resource name must contain (empty for all)
        repo_type: Only resources with this repo type (None for all)
    """
    name: str = ""
    repo_type: Optional[RepoType] = None


@dataclass
class UserResourceListOption:
    """Selects a set of resources of one owner by id."""
    owner: Account
    ids: List[str] = field(default_factory=list)


class ProjectRepository(ABC):
    """Abstract interface for project persistence.

    Implementations must make counter and set mutations (likes, forks,
    related resources) atomic at the storage layer, and must reject a
    property update whose version differs from the stored one with
    :class:`~mlhub.domain.errors.ConcurrentModification`.
    """

    @abstractmethod
    def save(self, p: Project) -> Project:
        """Persist a new project.

        Args:
            p: Project with an empty id

        Returns:
            Copy of the project carrying the assigned id

        Raises:
            ValueError: If the project already has an id
            DuplicateCreating: If the owner already has a project with that name
        """
        pass

    @abstractmethod
    def get(self, owner: Account, identity: str) -> Project:
        """Load a project by owner and id.

        Raises:
            NotFound: If no such project exists
            InvalidValue: If the stored document cannot be reconstructed
        """
        pass

    @abstractmethod
    def get_by_name(self, owner: Account, name: ProjName) -> Project:
        """Load a project by owner and name.

        Raises:
            NotFound: If no such project exists
        """
        pass

    @abstractmethod
    def list(self, owner: Account, option: ResourceListOption) -> List[Project]:
        """List the projects of ``owner`` matching ``option``.

        Returns:
            Matching projects, empty when there are none
        """
        pass

    @abstractmethod
    def find_user_projects(self, opts: List[UserResourceListOption]) -> List[Project]:
        """Load projects of several owners selected by id."""
        pass

    @abstractmethod
    def add_like(self, owner: Account, identity: str) -> None:
        pass

    @abstractmethod
    def remove_like(self, owner: Account, identity: str) -> None:
        pass

    @abstractmethod
    def increase_fork(self, index: ResourceIndex) -> None:
        pass

    @abstractmethod
    def add_related_model(self, info: RelatedResourceUpdate) -> None:
        pass

    @abstractmethod
    def remove_related_model(self, info: RelatedResourceUpdate) -> None:
        pass

    @abstractmethod
    def add_related_dataset(self, info: RelatedResourceUpdate) -> None:
        pass

    @abstractmethod
    def remove_related_dataset(self, info: RelatedResourceUpdate) -> None:
        pass

    @abstractmethod
    def update_property(self, info: ProjectPropertyUpdate) -> Project:
        """Replace the modifiable properties of a project.

        Args:
            info: New properties plus the version the caller read

        Returns:
            The updated project with its new version

        Raises:
            ConcurrentModification: If ``info.version`` is stale
            NotFound: If the project does not exist
        """
        pass
