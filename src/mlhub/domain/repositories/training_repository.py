"""Abstract training persistence."""
from abc import ABC, abstractmethod
from typing import Collection, List

from mlhub.domain.entities.training import (
    JobDetail, TrainingIndex, TrainingSummary, UserTraining,
)
from mlhub.domain.values import Account


class TrainingRepository(ABC):
    """Abstract interface for training persistence."""

    @abstractmethod
    def save(self, t: UserTraining) -> TrainingIndex:
        """Persist a new training.

        Args:
            t: Training with an empty id

        Returns:
            Index of the stored training

        Raises:
            ValueError: If the training already has an id
        """
        pass

    @abstractmethod
    def get(self, index: TrainingIndex) -> UserTraining:
        """Load one training.

        Raises:
            NotFound: If the training does not exist
        """
        pass

    @abstractmethod
    def list(self, user: Account, project_id: str) -> List[TrainingSummary]:
        """List the trainings of a project, newest first."""
        pass

    @abstractmethod
    def get_job_detail(self, index: TrainingIndex) -> JobDetail:
        pass

    @abstractmethod
    def update_job_detail(self, index: TrainingIndex, detail: JobDetail,
                          done_statuses: Collection[str] = ()) -> bool:
        """Overwrite the job detail reported by the training platform.

        A training whose stored status is in ``done_statuses`` is left
        untouched. The check and the write happen atomically in the store.

        Returns:
            True if the detail was written

        Raises:
            NotFound: If the training does not exist
        """
        pass
