"""Project use cases."""
import logging
from dataclasses import replace
from typing import List

from mlhub.application.commands.project_commands import (
    ProjectCreateCmd, ProjectForkCmd, ProjectUpdateCmd, ResourceListCmd,
    ResourceTagsUpdateCmd,
)
from mlhub.application.dtos.project_dto import ProjectDTO
from mlhub.application.services.activity import gen_activity, record_activity
from mlhub.application.services.provider_calls import call_provider
from mlhub.domain.entities.activity import ACTIVITY_TYPE_CREATE, ACTIVITY_TYPE_FORK
from mlhub.domain.entities.project import (
    Project, ProjectPropertyUpdate, RelatedResourceUpdate, ResourceIndex,
)
from mlhub.domain.platform.repo_provider import RepoOption, RepoProvider
from mlhub.domain.repositories.activity_repository import ActivityRepository
from mlhub.domain.repositories.project_repository import ProjectRepository
from mlhub.domain.values import RESOURCE_TYPE_PROJECT, Account, ProjName

logger = logging.getLogger(__name__)


class ProjectService:
    """Orchestrates the project repository, the repository provider and the
    activity log.

    The service holds no per-call state. Multi-step operations are not
    transactional: if persisting fails after the provider created a
    repository, that repository is left in place and the error propagates.
    """

    def __init__(self, repo: ProjectRepository, activity: ActivityRepository):
        """Initialize the project service.

        Args:
            repo: Project persistence port
            activity: Audit sink for user activities
        """
        self.repo = repo
        self.activity = activity

    def create(self, cmd: ProjectCreateCmd, pr: RepoProvider) -> ProjectDTO:
        """Create the backing repository, then persist the project."""
        cmd.validate()

        repo_id = call_provider(
            "create repository", pr.new,
            RepoOption(name=cmd.name, repo_type=cmd.repo_type),
        )

        v = cmd.to_project()
        v.repo_id = repo_id
        p = self.repo.save(v)

        logger.info("created project %s/%s (id=%s)", p.owner, p.name, p.id)

        record_activity(self.activity, gen_activity(
            p.owner, ACTIVITY_TYPE_CREATE, RESOURCE_TYPE_PROJECT, p.owner, p.id,
        ))

        return ProjectDTO.from_project(p)

    def get(self, owner: Account, project_id: str) -> ProjectDTO:
        return ProjectDTO.from_project(self.repo.get(owner, project_id))

    def get_by_name(self, owner: Account, name: ProjName) -> ProjectDTO:
        return ProjectDTO.from_project(self.repo.get_by_name(owner, name))

    def list(self, owner: Account, cmd: ResourceListCmd) -> List[ProjectDTO]:
        v = self.repo.list(owner, cmd.to_resource_list_option())
        return [ProjectDTO.from_project(p) for p in v]

    def update(self, p: Project, cmd: ProjectUpdateCmd, pr: RepoProvider) -> ProjectDTO:
        """Apply ``cmd`` to ``p`` using ``p.version`` as the optimistic lock.

        The provider is only called when the name or repo type changes.
        """
        cmd.validate()

        props = cmd.to_property(p)
        if props is None:
            return ProjectDTO.from_project(p)

        if props.name != p.name or props.repo_type != p.repo_type:
            call_provider(
                "update repository", pr.update, p.repo_id,
                RepoOption(name=props.name, repo_type=props.repo_type),
            )

        updated = self.repo.update_property(ProjectPropertyUpdate(
            owner=p.owner, id=p.id, version=p.version, props=props,
        ))

        return ProjectDTO.from_project(updated)

    def fork(self, cmd: ProjectForkCmd, pr: RepoProvider) -> ProjectDTO:
        cmd.validate()

        v = cmd.to_project()
        repo_id = call_provider(
            "fork repository", pr.fork, cmd.src.repo_id,
            RepoOption(name=v.name, repo_type=v.repo_type),
        )
        v.repo_id = repo_id

        p = self.repo.save(v)

        logger.info("forked project %s/%s into %s/%s",
                    cmd.src.owner, cmd.src.name, p.owner, p.name)

        self.repo.increase_fork(cmd.src.index())

        record_activity(self.activity, gen_activity(
            p.owner, ACTIVITY_TYPE_FORK, RESOURCE_TYPE_PROJECT, p.owner, p.id,
        ))

        return ProjectDTO.from_project(p)

    def add_like(self, owner: Account, project_id: str) -> None:
        self.repo.add_like(owner, project_id)

    def remove_like(self, owner: Account, project_id: str) -> None:
        self.repo.remove_like(owner, project_id)

    def add_related_model(self, p: Project, index: ResourceIndex) -> None:
        if index in p.related_models:
            return
        self.repo.add_related_model(RelatedResourceUpdate(project=p.index(), resource=index))

    def remove_related_model(self, p: Project, index: ResourceIndex) -> None:
        if index not in p.related_models:
            return
        self.repo.remove_related_model(RelatedResourceUpdate(project=p.index(), resource=index))

    def add_related_dataset(self, p: Project, index: ResourceIndex) -> None:
        if index in p.related_datasets:
            return
        self.repo.add_related_dataset(RelatedResourceUpdate(project=p.index(), resource=index))

    def remove_related_dataset(self, p: Project, index: ResourceIndex) -> None:
        if index not in p.related_datasets:
            return
        self.repo.remove_related_dataset(RelatedResourceUpdate(project=p.index(), resource=index))

    def set_tags(self, p: Project, cmd: ResourceTagsUpdateCmd) -> None:
        cmd.validate()

        tags = cmd.to_new_tags(p.tags)
        if tags == p.tags:
            return

        self.repo.update_property(ProjectPropertyUpdate(
            owner=p.owner, id=p.id, version=p.version,
            props=replace(p.props, tags=tags),
        ))
