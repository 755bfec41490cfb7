"""Port to the external compute platform that runs training jobs."""
from abc import ABC, abstractmethod

from mlhub.domain.entities.training import JobInfo, TrainingConfig
from mlhub.domain.values import Account


class TrainingPlatform(ABC):
    """Abstract interface for submitting and controlling training jobs.

    Job status is not polled through this port: the platform reports
    status, error and duration asynchronously and the host application
    forwards those reports to ``TrainingService.update_job_detail``.
    """

    @abstractmethod
    def create(self, user: Account, project_id: str, config: TrainingConfig) -> JobInfo:
        """Submit a validated configuration.

        Returns:
            Handle of the created job
        """
        pass

    @abstractmethod
    def terminate(self, job_id: str) -> None:
        """Ask the platform to stop a running job."""
        pass

    @abstractmethod
    def get_log_preview_url(self, job: JobInfo) -> str:
        """Return a short-lived URL previewing the job log."""
        pass
