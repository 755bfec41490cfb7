"""Training read shapes returned to the transport layer."""
from pydantic import BaseModel, Field

from mlhub.application.status import StatusReconciler
from mlhub.domain.entities.training import (
    TrainingIndex, TrainingSummary, UserTraining,
)
from mlhub.shared.timeutil import to_date


class ComputeDTO(BaseModel):
    type: str
    version: str
    flavor: str


class TrainingSummaryDTO(BaseModel):
    id: str
    name: str
    desc: str = ""
    error: str = ""
    status: str
    created_at: str
    is_done: bool
    duration: int = 0

    @classmethod
    def from_summary(cls, t: TrainingSummary, reconciler: StatusReconciler) -> "TrainingSummaryDTO":
        detail = t.job_detail
        return cls(
            id=t.id,
            name=t.name.value,
            desc=t.desc.value if t.desc is not None else "",
            error=detail.error,
            status=reconciler.display_status(detail.status),
            created_at=to_date(t.created_at),
            is_done=reconciler.is_job_done(detail.status),
            duration=detail.duration,
        )


class TrainingDTO(BaseModel):
    """Detail view of one training.

    ``log_preview_url`` is handed to the transport layer for redirects but is
    never part of the serialised body.
    """
    id: str
    project_id: str
    name: str
    desc: str = ""
    is_done: bool
    error: str = ""
    status: str
    duration: int = 0
    created_at: str
    compute: ComputeDTO
    aim_path: str = ""
    enable_aim: bool = False

    log_preview_url: str = Field(default="", exclude=True)

    @classmethod
    def from_training(cls, ut: UserTraining, reconciler: StatusReconciler,
                      link: str = "") -> "TrainingDTO":
        t = ut.config
        detail = ut.job_detail
        c = t.compute
        return cls(
            id=ut.id,
            project_id=ut.project_id,
            name=t.name.value,
            desc=t.desc.value if t.desc is not None else "",
            is_done=reconciler.is_job_done(detail.status),
            error=detail.error,
            status=reconciler.display_status(detail.status),
            duration=detail.duration,
            created_at=to_date(ut.created_at),
            compute=ComputeDTO(
                type=c.type.value,
                flavor=c.flavor.value,
                version=c.version.value,
            ),
            aim_path=detail.aim_path,
            enable_aim=t.enable_aim,
            log_preview_url=link,
        )


class TrainingIndexDTO(BaseModel):
    user: str
    project_id: str
    training_id: str

    @classmethod
    def from_index(cls, index: TrainingIndex) -> "TrainingIndexDTO":
        return cls(
            user=index.user.value,
            project_id=index.project_id,
            training_id=index.training_id,
        )
