"""Training use cases."""
import logging
from typing import List, Optional

from mlhub.application.commands.training_commands import TrainingCreateCmd
from mlhub.application.dtos.training_dto import (
    TrainingDTO, TrainingIndexDTO, TrainingSummaryDTO,
)
from mlhub.application.services.provider_calls import call_provider
from mlhub.application.status import StatusReconciler
from mlhub.domain.entities.training import JobDetail, TrainingIndex, UserTraining
from mlhub.domain.platform.training_platform import TrainingPlatform
from mlhub.domain.repositories.training_repository import TrainingRepository
from mlhub.domain.values import Account
from mlhub.shared.timeutil import now

logger = logging.getLogger(__name__)


class TrainingService:
    """Creates trainings and reconciles the status the platform reports.

    Creation is validate, submit, persist: nothing reaches the platform
    unless the command is valid, and nothing is persisted unless the
    platform accepted the job.
    """

    def __init__(self, repo: TrainingRepository, reconciler: StatusReconciler):
        """Initialize the training service.

        Args:
            repo: Training persistence port
            reconciler: Status normalisation rules
        """
        self.repo = repo
        self.reconciler = reconciler

    def create(self, cmd: TrainingCreateCmd, platform: TrainingPlatform) -> TrainingIndexDTO:
        cmd.validate()

        config = cmd.to_training_config()
        job = call_provider(
            "submit training job", platform.create,
            cmd.user, cmd.project_id, config,
        )

        index = self.repo.save(UserTraining(
            owner=cmd.user,
            project_id=cmd.project_id,
            config=config,
            job=job,
            created_at=now(),
        ))

        logger.info("created training %s for project %s of %s (job=%s)",
                    index.training_id, index.project_id, index.user, job.job_id)

        return TrainingIndexDTO.from_index(index)

    def get(self, index: TrainingIndex,
            platform: Optional[TrainingPlatform] = None) -> TrainingDTO:
        """Load one training.

        When ``platform`` is given and the job is still running, the DTO
        carries a log preview link.
        """
        ut = self.repo.get(index)

        link = ""
        if platform is not None and ut.job.job_id and not self.reconciler.is_job_done(ut.job_detail.status):
            link = call_provider("get log preview url", platform.get_log_preview_url, ut.job)

        return TrainingDTO.from_training(ut, self.reconciler, link)

    def list(self, user: Account, project_id: str) -> List[TrainingSummaryDTO]:
        v = self.repo.list(user, project_id)
        return [TrainingSummaryDTO.from_summary(t, self.reconciler) for t in v]

    def update_job_detail(self, index: TrainingIndex, detail: JobDetail) -> None:
        """Record a status report from the platform.

        A job that has reached a done status keeps its final detail; later
        reports for it are dropped.
        """
        applied = self.repo.update_job_detail(index, detail, self.reconciler.done_statuses)
        if not applied:
            logger.info("ignoring status %r for finished training %s",
                        detail.status, index.training_id)

    def terminate(self, index: TrainingIndex, platform: TrainingPlatform) -> None:
        """Ask the platform to stop the job. The final status arrives later
        through ``update_job_detail``."""
        ut = self.repo.get(index)
        if self.reconciler.is_job_done(ut.job_detail.status):
            return

        call_provider("terminate training job", platform.terminate, ut.job.job_id)
