"""Training entities - user-submitted configuration and job state."""
from dataclasses import dataclass, field
from typing import List, Optional

from mlhub.domain.values import (
    Account, ComputeFlavor, ComputeType, ComputeVersion, CustomizedKey,
    CustomizedValue, Directory, FilePath, ProjName, ResourceType,
    TrainingDesc, TrainingName,
)


@dataclass
class Compute:
    """Compute resources requested for a training job."""
    type: Optional[ComputeType] = None
    flavor: Optional[ComputeFlavor] = None
    version: Optional[ComputeVersion] = None


@dataclass
class KeyValue:
    """A hyperparameter or environment variable. Only the key is required."""
    key: Optional[CustomizedKey] = None
    value: Optional[CustomizedValue] = None


@dataclass
class Input:
    """Binds a named input of the job to a file in another user's resource.

    Attributes:
        key: Name under which the job sees the input
        user: Owner of the referenced resource
        type: Kind of the referenced resource (model or dataset)
        repo_id: Repository id of the referenced resource
        file: Path inside the repository, empty for the whole repository
    """
    key: Optional[CustomizedKey] = None
    user: Optional[Account] = None
    type: Optional[ResourceType] = None
    repo_id: str = ""
    file: str = ""


@dataclass
class TrainingConfig:
    """Everything a user submits to run a training job.

    The configuration is immutable once the training has been created. Fields
    are optional at the type level so that an incomplete command can be
    represented and rejected by validation.
    """
    project_name: Optional[ProjName] = None
    project_repo_id: str = ""
    name: Optional[TrainingName] = None
    desc: Optional[TrainingDesc] = None
    code_dir: Optional[Directory] = None
    boot_file: Optional[FilePath] = None
    compute: Compute = field(default_factory=Compute)
    hyperparameters: List[KeyValue] = field(default_factory=list)
    env: List[KeyValue] = field(default_factory=list)
    inputs: List[Input] = field(default_factory=list)
    enable_aim: bool = False


@dataclass
class JobInfo:
    """Handle of a job submitted to the training platform."""
    job_id: str = ""
    endpoint: str = ""
    log_dir: str = ""
    aim_dir: str = ""
    output_dir: str = ""


@dataclass
class JobDetail:
    """Job state as last reported by the training platform.

    ``duration`` is in seconds. An empty ``status`` means the platform has not
    reported anything yet.
    """
    status: str = ""
    error: str = ""
    duration: int = 0
    aim_path: str = ""


@dataclass
class UserTraining:
    """Training aggregate root."""
    owner: Account
    project_id: str
    config: TrainingConfig
    id: str = ""
    job: JobInfo = field(default_factory=JobInfo)
    job_detail: JobDetail = field(default_factory=JobDetail)
    created_at: int = 0
    version: int = 0


@dataclass
class TrainingSummary:
    """Read projection of a training used for listings."""
    id: str
    name: TrainingName
    desc: Optional[TrainingDesc]
    job_detail: JobDetail
    created_at: int

    @classmethod
    def from_training(cls, t: UserTraining) -> "TrainingSummary":
        return cls(
            id=t.id,
            name=t.config.name,
            desc=t.config.desc,
            job_detail=t.job_detail,
            created_at=t.created_at,
        )


@dataclass(frozen=True)
class TrainingIndex:
    """Locates one training of one project of one user."""
    user: Account
    project_id: str
    training_id: str
