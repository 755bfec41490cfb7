"""Project read shape returned to the transport layer."""
from typing import List

from pydantic import BaseModel, Field

from mlhub.domain.entities.project import Project


class ProjectDTO(BaseModel):
    id: str
    owner: str
    name: str
    desc: str
    type: str
    cover_id: str
    protocol: str
    training: str
    repo_type: str
    repo_id: str
    tags: List[str] = Field(default_factory=list)
    like_count: int = 0
    fork_count: int = 0

    @classmethod
    def from_project(cls, p: Project) -> "ProjectDTO":
        return cls(
            id=p.id,
            owner=p.owner.value,
            name=p.name.value,
            desc=p.desc.value,
            type=p.type.value,
            cover_id=p.cover_id.value,
            protocol=p.protocol.value,
            training=p.training.value,
            repo_type=p.repo_type.value,
            repo_id=p.repo_id,
            tags=list(p.tags),
            like_count=p.like_count,
            fork_count=p.fork_count,
        )
