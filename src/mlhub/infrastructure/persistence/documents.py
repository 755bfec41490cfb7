"""Persisted document shapes.

Documents hold plain strings and numbers only. Converting them back into
domain objects re-runs value validation, so a corrupted document fails
loudly on read.
"""
from typing import List

from pydantic import BaseModel, Field


class ResourceIndexDO(BaseModel):
    owner: str
    id: str


class ProjectDO(BaseModel):
    id: str = ""
    owner: str
    name: str
    desc: str = ""
    type: str
    cover_id: str
    protocol: str
    training: str
    repo_type: str
    repo_id: str = ""
    tags: List[str] = Field(default_factory=list)
    created_at: int = 0
    updated_at: int = 0
    version: int = 0
    like_count: int = 0
    fork_count: int = 0
    related_models: List[ResourceIndexDO] = Field(default_factory=list)
    related_datasets: List[ResourceIndexDO] = Field(default_factory=list)


class ResourceListDO(BaseModel):
    name: str = ""
    repo_type: str = ""


class RelatedResourceDO(BaseModel):
    owner: str
    project_id: str
    resource_owner: str
    resource_id: str

    def resource(self) -> ResourceIndexDO:
        return ResourceIndexDO(owner=self.resource_owner, id=self.resource_id)


class ProjectPropertyDO(BaseModel):
    owner: str
    id: str
    version: int
    name: str
    desc: str
    cover_id: str
    repo_type: str
    tags: List[str] = Field(default_factory=list)


class ComputeDO(BaseModel):
    type: str
    flavor: str
    version: str


class KeyValueDO(BaseModel):
    key: str
    value: str = ""


class InputDO(BaseModel):
    key: str
    user: str
    type: str
    repo_id: str
    file: str = ""


class JobInfoDO(BaseModel):
    job_id: str = ""
    endpoint: str = ""
    log_dir: str = ""
    aim_dir: str = ""
    output_dir: str = ""


class JobDetailDO(BaseModel):
    status: str = ""
    error: str = ""
    duration: int = 0
    aim_path: str = ""


class TrainingDO(BaseModel):
    id: str = ""
    owner: str
    project_id: str
    project_name: str
    project_repo_id: str
    name: str
    desc: str = ""
    code_dir: str
    boot_file: str
    compute: ComputeDO
    hyperparameters: List[KeyValueDO] = Field(default_factory=list)
    env: List[KeyValueDO] = Field(default_factory=list)
    inputs: List[InputDO] = Field(default_factory=list)
    enable_aim: bool = False
    job: JobInfoDO = Field(default_factory=JobInfoDO)
    job_detail: JobDetailDO = Field(default_factory=JobDetailDO)
    created_at: int = 0
    version: int = 0


class ActivityDO(BaseModel):
    owner: str
    type: str
    time: int
    resource_type: str
    resource_owner: str
    resource_id: str
