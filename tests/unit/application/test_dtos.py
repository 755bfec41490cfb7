"""Tests for transport DTOs."""
from mlhub.application.dtos import (
    ProjectDTO, TrainingDTO, TrainingIndexDTO, TrainingSummaryDTO,
)
from mlhub.domain.entities.training import JobDetail, TrainingIndex, TrainingSummary
from mlhub.domain.values import TrainingDesc, TrainingName


class TestProjectDTO:
    """Test cases for ProjectDTO."""

    def test_from_project(self, sample_project):
        dto = ProjectDTO.from_project(sample_project)

        assert dto.id == "p1"
        assert dto.owner == "alice"
        assert dto.name == "proj"
        assert dto.type == "cv"
        assert dto.protocol == "mit"
        assert dto.training == "modelarts"
        assert dto.repo_type == "public"
        assert dto.repo_id == "repo-1"
        assert dto.tags == ["vision"]
        assert dto.like_count == 0


class TestTrainingDTO:
    """Test cases for TrainingDTO."""

    def test_scheduling_training(self, sample_user_training, reconciler):
        """Test a training the platform has not reported on yet."""
        dto = TrainingDTO.from_training(sample_user_training, reconciler)

        assert dto.id == "t1"
        assert dto.project_id == "p1"
        assert dto.name == "train1"
        assert dto.desc == ""
        assert dto.status == "scheduling"
        assert dto.is_done is False
        assert dto.created_at == "2023-11-14"
        assert dto.compute.type == "npu"
        assert dto.compute.flavor == "f1"
        assert dto.compute.version == "v1"

    def test_finished_training(self, sample_user_training, reconciler):
        sample_user_training.job_detail = JobDetail(
            status="Failed", error="oom", duration=42, aim_path="aim/1",
        )
        dto = TrainingDTO.from_training(sample_user_training, reconciler)

        assert dto.is_done is True
        assert dto.status == "Failed"
        assert dto.error == "oom"
        assert dto.duration == 42
        assert dto.aim_path == "aim/1"

    def test_log_preview_url_is_not_serialised(self, sample_user_training, reconciler):
        """Test that the log link is available but excluded from the body."""
        dto = TrainingDTO.from_training(sample_user_training, reconciler, "https://logs/1")

        assert dto.log_preview_url == "https://logs/1"
        assert "log_preview_url" not in dto.model_dump()
        assert "log_preview_url" not in dto.model_dump_json()


class TestTrainingSummaryDTO:
    """Test cases for TrainingSummaryDTO."""

    def test_from_summary(self, reconciler):
        s = TrainingSummary(
            id="t2",
            name=TrainingName("train2"),
            desc=TrainingDesc("second"),
            job_detail=JobDetail(status="Running", duration=5),
            created_at=0,
        )
        dto = TrainingSummaryDTO.from_summary(s, reconciler)

        assert dto.name == "train2"
        assert dto.desc == "second"
        assert dto.status == "Running"
        assert dto.is_done is False
        assert dto.duration == 5
        assert dto.created_at == "1970-01-01"

    def test_from_training_summary(self, sample_user_training, reconciler):
        dto = TrainingSummaryDTO.from_summary(
            TrainingSummary.from_training(sample_user_training), reconciler,
        )
        assert dto.status == "scheduling"
        assert dto.desc == ""


class TestTrainingIndexDTO:
    """Test cases for TrainingIndexDTO."""

    def test_from_index(self, alice):
        dto = TrainingIndexDTO.from_index(
            TrainingIndex(user=alice, project_id="p1", training_id="t1"),
        )
        assert dto.model_dump() == {"user": "alice", "project_id": "p1", "training_id": "t1"}
