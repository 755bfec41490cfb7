"""Project repository backed by a document mapper."""
from dataclasses import replace
from typing import List

from mlhub.domain.entities.project import (
    Project, ProjectModifiableProperty, ProjectPropertyUpdate,
    RelatedResourceUpdate, ResourceIndex,
)
from mlhub.domain.repositories.project_repository import (
    ProjectRepository, ResourceListOption, UserResourceListOption,
)
from mlhub.domain.values import (
    Account, CoverId, ProjName, ProjType, ProtocolName, RepoType,
    ResourceDesc, TrainingPlatform,
)
from mlhub.infrastructure.persistence.documents import (
    ProjectDO, ProjectPropertyDO, RelatedResourceDO, ResourceIndexDO,
    ResourceListDO,
)
from mlhub.infrastructure.persistence.mappers import ProjectMapper
from mlhub.infrastructure.repositories.errors import converted_errors
from mlhub.shared.timeutil import now


class DocumentProjectRepository(ProjectRepository):
    """Maps Project aggregates to :class:`ProjectDO` documents and back.

    Reading re-validates every stored string through the value types, so a
    corrupted document surfaces as ``InvalidValue``.
    """

    def __init__(self, mapper: ProjectMapper):
        self.mapper = mapper

    def save(self, p: Project) -> Project:
        if p.id != "":
            raise ValueError("must be a new project")

        r = replace(p)
        if not r.created_at:
            r.created_at = now()
        r.updated_at = r.created_at

        with converted_errors():
            r.id = self.mapper.insert(to_project_do(r))

        r.version = 0
        return r

    def get(self, owner: Account, identity: str) -> Project:
        with converted_errors():
            v = self.mapper.get(owner.value, identity)
        return to_project(v)

    def get_by_name(self, owner: Account, name: ProjName) -> Project:
        with converted_errors():
            v = self.mapper.get_by_name(owner.value, name.value)
        return to_project(v)

    def list(self, owner: Account, option: ResourceListOption) -> List[Project]:
        do = ResourceListDO(name=option.name)
        if option.repo_type is not None:
            do.repo_type = option.repo_type.value

        with converted_errors():
            v = self.mapper.list(owner.value, do)
        return [to_project(d) for d in v]

    def find_user_projects(self, opts: List[UserResourceListOption]) -> List[Project]:
        do = {o.owner.value: list(o.ids) for o in opts}
        with converted_errors():
            v = self.mapper.list_users_projects(do)
        return [to_project(d) for d in v]

    def add_like(self, owner: Account, identity: str) -> None:
        self._call(self.mapper.add_like, owner.value, identity)

    def remove_like(self, owner: Account, identity: str) -> None:
        self._call(self.mapper.remove_like, owner.value, identity)

    def increase_fork(self, index: ResourceIndex) -> None:
        self._call(self.mapper.increase_fork, index.owner.value, index.id)

    def add_related_model(self, info: RelatedResourceUpdate) -> None:
        self._call(self.mapper.add_related_model, to_related_resource_do(info))

    def remove_related_model(self, info: RelatedResourceUpdate) -> None:
        self._call(self.mapper.remove_related_model, to_related_resource_do(info))

    def add_related_dataset(self, info: RelatedResourceUpdate) -> None:
        self._call(self.mapper.add_related_dataset, to_related_resource_do(info))

    def remove_related_dataset(self, info: RelatedResourceUpdate) -> None:
        self._call(self.mapper.remove_related_dataset, to_related_resource_do(info))

    def update_property(self, info: ProjectPropertyUpdate) -> Project:
        props = info.props
        do = ProjectPropertyDO(
            owner=info.owner.value,
            id=info.id,
            version=info.version,
            name=props.name.value,
            desc=props.desc.value,
            cover_id=props.cover_id.value,
            repo_type=props.repo_type.value,
            tags=list(props.tags),
        )
        with converted_errors():
            v = self.mapper.update_property(do)
        return to_project(v)

    @staticmethod
    def _call(fn, *args) -> None:
        with converted_errors():
            fn(*args)


def to_project_do(p: Project) -> ProjectDO:
    return ProjectDO(
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
        created_at=p.created_at,
        updated_at=p.updated_at,
        version=p.version,
        like_count=p.like_count,
        fork_count=p.fork_count,
        related_models=[to_resource_index_do(i) for i in p.related_models],
        related_datasets=[to_resource_index_do(i) for i in p.related_datasets],
    )


def to_project(do: ProjectDO) -> Project:
    """Rebuild a Project; raises InvalidValue on any illegal stored field."""
    return Project(
        id=do.id,
        owner=Account(do.owner),
        type=ProjType(do.type),
        protocol=ProtocolName(do.protocol),
        training=TrainingPlatform(do.training),
        props=ProjectModifiableProperty(
            name=ProjName(do.name),
            desc=ResourceDesc(do.desc),
            cover_id=CoverId(do.cover_id),
            repo_type=RepoType(do.repo_type),
            tags=list(do.tags),
        ),
        repo_id=do.repo_id,
        related_models=[to_resource_index(i) for i in do.related_models],
        related_datasets=[to_resource_index(i) for i in do.related_datasets],
        like_count=do.like_count,
        fork_count=do.fork_count,
        version=do.version,
        created_at=do.created_at,
        updated_at=do.updated_at,
    )


def to_resource_index_do(i: ResourceIndex) -> ResourceIndexDO:
    return ResourceIndexDO(owner=i.owner.value, id=i.id)


def to_resource_index(do: ResourceIndexDO) -> ResourceIndex:
    return ResourceIndex(owner=Account(do.owner), id=do.id)


def to_related_resource_do(info: RelatedResourceUpdate) -> RelatedResourceDO:
    return RelatedResourceDO(
        owner=info.project.owner.value,
        project_id=info.project.id,
        resource_owner=info.resource.owner.value,
        resource_id=info.resource.id,
    )
