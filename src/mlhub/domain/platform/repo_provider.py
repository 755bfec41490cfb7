"""Port to the version-control hosting service that backs projects."""
from abc import ABC, abstractmethod
from dataclasses import dataclass

from mlhub.domain.values import ProjName, RepoType


@dataclass(frozen=True)
class RepoOption:
    name: ProjName
    repo_type: RepoType


class RepoProvider(ABC):
    """Abstract interface for creating and changing backing repositories.

    Implementations report failures by raising; the application layer wraps
    them in :class:`~mlhub.domain.errors.ExternalProviderError`.
    """

    @abstractmethod
    def new(self, option: RepoOption) -> str:
        """Create a repository and return its id at the provider."""
        pass

    @abstractmethod
    def fork(self, src_repo_id: str, option: RepoOption) -> str:
        """Fork ``src_repo_id`` into a new repository and return its id."""
        pass

    @abstractmethod
    def update(self, repo_id: str, option: RepoOption) -> None:
        """Rename the repository or change its visibility."""
        pass
