"""Test fixtures for unit testing."""
import pytest
from unittest.mock import Mock

from mlhub.application.commands.project_commands import ProjectCreateCmd
from mlhub.application.commands.training_commands import TrainingCreateCmd
from mlhub.application.status import StatusReconciler
from mlhub.domain.entities.project import Project, ProjectModifiableProperty
from mlhub.domain.entities.training import (
    Compute, JobInfo, TrainingConfig, UserTraining,
)
from mlhub.domain.platform.repo_provider import RepoProvider
from mlhub.domain.platform.training_platform import TrainingPlatform
from mlhub.domain.repositories.activity_repository import ActivityRepository
from mlhub.domain.repositories.project_repository import ProjectRepository
from mlhub.domain.repositories.training_repository import TrainingRepository
from mlhub.domain.values import (
    Account, ComputeFlavor, ComputeType, ComputeVersion, CoverId, Directory,
    FilePath, ProjName, ProjType, ProtocolName, RepoType, ResourceDesc,
    TrainingName, TrainingPlatform as TrainingPlatformName,
)
from mlhub.infrastructure.persistence.in_memory import (
    InMemoryActivityMapper, InMemoryProjectMapper, InMemoryTrainingMapper,
)
from mlhub.infrastructure.repositories.document_activity_repository import DocumentActivityRepository
from mlhub.infrastructure.repositories.document_project_repository import DocumentProjectRepository
from mlhub.infrastructure.repositories.document_training_repository import DocumentTrainingRepository


@pytest.fixture
def alice():
    return Account("alice")


@pytest.fixture
def sample_training_config():
    """The minimal valid configuration: no hyperparameters, env or inputs."""
    return TrainingConfig(
        project_name=ProjName("proj"),
        project_repo_id="r1",
        name=TrainingName("train1"),
        code_dir=Directory("/code"),
        boot_file=FilePath("main.py"),
        compute=Compute(
            type=ComputeType("npu"),
            flavor=ComputeFlavor("f1"),
            version=ComputeVersion("v1"),
        ),
    )


@pytest.fixture
def sample_training_cmd(alice, sample_training_config):
    return TrainingCreateCmd(user=alice, project_id="p1", config=sample_training_config)


@pytest.fixture
def sample_user_training(alice, sample_training_config):
    return UserTraining(
        owner=alice,
        project_id="p1",
        config=sample_training_config,
        id="t1",
        job=JobInfo(job_id="job-1", endpoint="https://platform.example"),
        created_at=1700000000,
    )


@pytest.fixture
def sample_project_cmd(alice):
    return ProjectCreateCmd(
        owner=alice,
        name=ProjName("proj"),
        desc=ResourceDesc("a project"),
        type=ProjType("cv"),
        cover_id=CoverId("1"),
        repo_type=RepoType("public"),
        protocol=ProtocolName("mit"),
        training=TrainingPlatformName("modelarts"),
    )


@pytest.fixture
def sample_project(alice):
    """A persisted project."""
    return Project(
        owner=alice,
        type=ProjType("cv"),
        protocol=ProtocolName("mit"),
        training=TrainingPlatformName("modelarts"),
        props=ProjectModifiableProperty(
            name=ProjName("proj"),
            desc=ResourceDesc("a project"),
            cover_id=CoverId("1"),
            repo_type=RepoType("public"),
            tags=["vision"],
        ),
        id="p1",
        repo_id="repo-1",
        version=3,
    )


@pytest.fixture
def reconciler():
    return StatusReconciler()


@pytest.fixture
def mock_project_repo():
    """Mock project repository that echoes saves back with an id."""
    repo = Mock(spec=ProjectRepository)

    def _save(p):
        p.id = "p-new"
        return p

    repo.save.side_effect = _save
    return repo


@pytest.fixture
def mock_activity_repo():
    return Mock(spec=ActivityRepository)


@pytest.fixture
def mock_training_repo():
    return Mock(spec=TrainingRepository)


@pytest.fixture
def mock_repo_provider():
    provider = Mock(spec=RepoProvider)
    provider.new.return_value = "repo-new"
    provider.fork.return_value = "repo-fork"
    return provider


@pytest.fixture
def mock_training_platform():
    platform = Mock(spec=TrainingPlatform)
    platform.create.return_value = JobInfo(job_id="job-1", endpoint="https://platform.example")
    platform.get_log_preview_url.return_value = "https://logs.example/job-1"
    return platform


@pytest.fixture
def project_mapper():
    return InMemoryProjectMapper()


@pytest.fixture
def project_repo(project_mapper):
    return DocumentProjectRepository(project_mapper)


@pytest.fixture
def training_mapper():
    return InMemoryTrainingMapper()


@pytest.fixture
def training_repo(training_mapper):
    return DocumentTrainingRepository(training_mapper)


@pytest.fixture
def activity_mapper():
    return InMemoryActivityMapper()


@pytest.fixture
def activity_repo(activity_mapper):
    return DocumentActivityRepository(activity_mapper)
