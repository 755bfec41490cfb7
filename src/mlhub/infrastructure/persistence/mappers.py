"""Document mapper contracts implemented by storage backends.

Mappers speak documents, not domain objects, and signal failures with the
errors in :mod:`mlhub.infrastructure.persistence.errors`. Every method is a
single atomic operation on the backing store.
"""
from abc import ABC, abstractmethod
from typing import Collection, Dict, List

from mlhub.infrastructure.persistence.documents import (
    ActivityDO, JobDetailDO, ProjectDO, ProjectPropertyDO, RelatedResourceDO,
    ResourceListDO, TrainingDO,
)


class ProjectMapper(ABC):

    @abstractmethod
    def insert(self, do: ProjectDO) -> str:
        """Store a new document and return its assigned id.

        Raises:
            DocExistsError: If the owner already has a project of that name
        """
        pass

    @abstractmethod
    def get(self, owner: str, identity: str) -> ProjectDO:
        pass

    @abstractmethod
    def get_by_name(self, owner: str, name: str) -> ProjectDO:
        pass

    @abstractmethod
    def list(self, owner: str, do: ResourceListDO) -> List[ProjectDO]:
        pass

    @abstractmethod
    def list_users_projects(self, opts: Dict[str, List[str]]) -> List[ProjectDO]:
        pass

    @abstractmethod
    def increase_fork(self, owner: str, identity: str) -> None:
        pass

    @abstractmethod
    def add_like(self, owner: str, identity: str) -> None:
        pass

    @abstractmethod
    def remove_like(self, owner: str, identity: str) -> None:
        pass

    @abstractmethod
    def add_related_model(self, do: RelatedResourceDO) -> None:
        pass

    @abstractmethod
    def remove_related_model(self, do: RelatedResourceDO) -> None:
        pass

    @abstractmethod
    def add_related_dataset(self, do: RelatedResourceDO) -> None:
        pass

    @abstractmethod
    def remove_related_dataset(self, do: RelatedResourceDO) -> None:
        pass

    @abstractmethod
    def update_property(self, do: ProjectPropertyDO) -> ProjectDO:
        """Replace the modifiable fields if ``do.version`` matches.

        Returns:
            The stored document after the update

        Raises:
            VersionMismatchError: If the stored version differs
        """
        pass


class TrainingMapper(ABC):

    @abstractmethod
    def insert(self, do: TrainingDO) -> str:
        pass

    @abstractmethod
    def get(self, owner: str, project_id: str, identity: str) -> TrainingDO:
        pass

    @abstractmethod
    def list(self, owner: str, project_id: str) -> List[TrainingDO]:
        pass

    @abstractmethod
    def get_job_detail(self, owner: str, project_id: str, identity: str) -> JobDetailDO:
        pass

    @abstractmethod
    def update_job_detail(self, owner: str, project_id: str, identity: str,
                          detail: JobDetailDO, done_statuses: Collection[str] = ()) -> bool:
        """Overwrite the job detail unless the stored status is in
        ``done_statuses``. The check and the write are one operation.

        Returns:
            True if the detail was written
        """
        pass


class ActivityMapper(ABC):

    @abstractmethod
    def insert(self, do: ActivityDO) -> None:
        pass

    @abstractmethod
    def list(self, owner: str) -> List[ActivityDO]:
        """Activities recorded for ``owner``, oldest first."""
        pass
