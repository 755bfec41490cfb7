"""Training repository backed by a document mapper."""
from typing import Collection, List

from mlhub.domain.entities.training import (
    Compute, Input, JobDetail, JobInfo, KeyValue, TrainingConfig,
    TrainingIndex, TrainingSummary, UserTraining,
)
from mlhub.domain.repositories.training_repository import TrainingRepository
from mlhub.domain.values import (
    Account, ComputeFlavor, ComputeType, ComputeVersion, CustomizedKey,
    Directory, FilePath, ProjName, ResourceType, TrainingName,
    new_customized_value, new_training_desc,
)
from mlhub.infrastructure.persistence.documents import (
    ComputeDO, InputDO, JobDetailDO, JobInfoDO, KeyValueDO, TrainingDO,
)
from mlhub.infrastructure.persistence.mappers import TrainingMapper
from mlhub.infrastructure.repositories.errors import converted_errors


class DocumentTrainingRepository(TrainingRepository):

    def __init__(self, mapper: TrainingMapper):
        self.mapper = mapper

    def save(self, t: UserTraining) -> TrainingIndex:
        if t.id != "":
            raise ValueError("must be a new training")

        with converted_errors():
            v = self.mapper.insert(to_training_do(t))

        return TrainingIndex(user=t.owner, project_id=t.project_id, training_id=v)

    def get(self, index: TrainingIndex) -> UserTraining:
        with converted_errors():
            v = self.mapper.get(index.user.value, index.project_id, index.training_id)
        return to_user_training(v)

    def list(self, user: Account, project_id: str) -> List[TrainingSummary]:
        with converted_errors():
            v = self.mapper.list(user.value, project_id)
        return [TrainingSummary.from_training(to_user_training(d)) for d in v]

    def get_job_detail(self, index: TrainingIndex) -> JobDetail:
        with converted_errors():
            v = self.mapper.get_job_detail(index.user.value, index.project_id, index.training_id)
        return JobDetail(**v.model_dump())

    def update_job_detail(self, index: TrainingIndex, detail: JobDetail,
                          done_statuses: Collection[str] = ()) -> bool:
        do = JobDetailDO(
            status=detail.status,
            error=detail.error,
            duration=detail.duration,
            aim_path=detail.aim_path,
        )
        with converted_errors():
            return self.mapper.update_job_detail(
                index.user.value, index.project_id, index.training_id, do,
                done_statuses,
            )


def _value(v) -> str:
    return v.value if v is not None else ""


def to_training_do(t: UserTraining) -> TrainingDO:
    c = t.config
    return TrainingDO(
        id=t.id,
        owner=t.owner.value,
        project_id=t.project_id,
        project_name=c.project_name.value,
        project_repo_id=c.project_repo_id,
        name=c.name.value,
        desc=_value(c.desc),
        code_dir=c.code_dir.value,
        boot_file=c.boot_file.value,
        compute=ComputeDO(
            type=c.compute.type.value,
            flavor=c.compute.flavor.value,
            version=c.compute.version.value,
        ),
        hyperparameters=[to_key_value_do(kv) for kv in c.hyperparameters],
        env=[to_key_value_do(kv) for kv in c.env],
        inputs=[
            InputDO(
                key=i.key.value,
                user=i.user.value,
                type=i.type.value,
                repo_id=i.repo_id,
                file=i.file,
            )
            for i in c.inputs
        ],
        enable_aim=c.enable_aim,
        job=JobInfoDO(
            job_id=t.job.job_id,
            endpoint=t.job.endpoint,
            log_dir=t.job.log_dir,
            aim_dir=t.job.aim_dir,
            output_dir=t.job.output_dir,
        ),
        job_detail=JobDetailDO(
            status=t.job_detail.status,
            error=t.job_detail.error,
            duration=t.job_detail.duration,
            aim_path=t.job_detail.aim_path,
        ),
        created_at=t.created_at,
        version=t.version,
    )


def to_key_value_do(kv: KeyValue) -> KeyValueDO:
    return KeyValueDO(key=kv.key.value, value=_value(kv.value))


def to_key_value(do: KeyValueDO) -> KeyValue:
    return KeyValue(key=CustomizedKey(do.key), value=new_customized_value(do.value))


def to_input(do: InputDO) -> Input:
    return Input(
        key=CustomizedKey(do.key),
        user=Account(do.user),
        type=ResourceType(do.type),
        repo_id=do.repo_id,
        file=do.file,
    )


def to_user_training(do: TrainingDO) -> UserTraining:
    """Rebuild a UserTraining; raises InvalidValue on any illegal stored field."""
    return UserTraining(
        id=do.id,
        owner=Account(do.owner),
        project_id=do.project_id,
        config=TrainingConfig(
            project_name=ProjName(do.project_name),
            project_repo_id=do.project_repo_id,
            name=TrainingName(do.name),
            desc=new_training_desc(do.desc),
            code_dir=Directory(do.code_dir),
            boot_file=FilePath(do.boot_file),
            compute=Compute(
                type=ComputeType(do.compute.type),
                flavor=ComputeFlavor(do.compute.flavor),
                version=ComputeVersion(do.compute.version),
            ),
            hyperparameters=[to_key_value(kv) for kv in do.hyperparameters],
            env=[to_key_value(kv) for kv in do.env],
            inputs=[to_input(i) for i in do.inputs],
            enable_aim=do.enable_aim,
        ),
        job=JobInfo(**do.job.model_dump()),
        job_detail=JobDetail(**do.job_detail.model_dump()),
        created_at=do.created_at,
        version=do.version,
    )
