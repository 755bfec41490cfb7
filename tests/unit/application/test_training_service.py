"""Tests for the training service."""
import threading

import pytest

from mlhub.application.services import TrainingService
from mlhub.domain.entities.training import (
    JobDetail, TrainingIndex, TrainingSummary, UserTraining,
)
from mlhub.domain.errors import ExternalProviderError, NotFound, ValidationError


@pytest.fixture
def index(alice):
    return TrainingIndex(user=alice, project_id="p1", training_id="t1")


@pytest.fixture
def service(mock_training_repo, reconciler):
    return TrainingService(repo=mock_training_repo, reconciler=reconciler)


class TestTrainingCreate:
    """Test cases for TrainingService.create."""

    def test_create(self, service, sample_training_cmd, mock_training_platform,
                    mock_training_repo, index):
        """Test that a valid command is submitted then persisted."""
        mock_training_repo.save.return_value = index

        dto = service.create(sample_training_cmd, mock_training_platform)

        assert dto.training_id == "t1"
        assert dto.user == "alice"
        mock_training_platform.create.assert_called_once_with(
            sample_training_cmd.user, "p1", sample_training_cmd.config,
        )
        saved = mock_training_repo.save.call_args.args[0]
        assert saved.id == ""
        assert saved.job.job_id == "job-1"
        assert saved.created_at > 0

    def test_invalid_command_touches_nothing(self, service, sample_training_cmd,
                                             mock_training_platform, mock_training_repo):
        sample_training_cmd.project_id = ""

        with pytest.raises(ValidationError):
            service.create(sample_training_cmd, mock_training_platform)

        mock_training_platform.create.assert_not_called()
        mock_training_repo.save.assert_not_called()

    def test_platform_failure_skips_save(self, service, sample_training_cmd,
                                         mock_training_platform, mock_training_repo):
        mock_training_platform.create.side_effect = RuntimeError("no capacity")

        with pytest.raises(ExternalProviderError):
            service.create(sample_training_cmd, mock_training_platform)

        mock_training_repo.save.assert_not_called()

    def test_none_project_id_never_reaches_platform(self, reconciler, training_repo,
                                                    sample_training_cmd,
                                                    mock_training_platform):
        """Test that a None project id fails validation before submission."""
        service = TrainingService(repo=training_repo, reconciler=reconciler)
        sample_training_cmd.project_id = None

        with pytest.raises(ValidationError):
            service.create(sample_training_cmd, mock_training_platform)

        mock_training_platform.create.assert_not_called()

    def test_platform_error_is_not_rewrapped(self, service, sample_training_cmd,
                                             mock_training_platform):
        original = ExternalProviderError("flavor sold out")
        mock_training_platform.create.side_effect = original

        with pytest.raises(ExternalProviderError) as exc_info:
            service.create(sample_training_cmd, mock_training_platform)

        assert exc_info.value is original


class TestTrainingGet:
    """Test cases for TrainingService.get."""

    def test_get_without_platform(self, service, mock_training_repo,
                                  sample_user_training, index):
        mock_training_repo.get.return_value = sample_user_training

        dto = service.get(index)

        assert dto.status == "scheduling"
        assert dto.log_preview_url == ""

    def test_get_running_with_link(self, service, mock_training_repo,
                                   mock_training_platform, sample_user_training, index):
        sample_user_training.job_detail = JobDetail(status="Running")
        mock_training_repo.get.return_value = sample_user_training

        dto = service.get(index, mock_training_platform)

        assert dto.log_preview_url == "https://logs.example/job-1"
        mock_training_platform.get_log_preview_url.assert_called_once_with(sample_user_training.job)

    def test_get_done_has_no_link(self, service, mock_training_repo,
                                  mock_training_platform, sample_user_training, index):
        sample_user_training.job_detail = JobDetail(status="Completed")
        mock_training_repo.get.return_value = sample_user_training

        dto = service.get(index, mock_training_platform)

        assert dto.is_done is True
        assert dto.log_preview_url == ""
        mock_training_platform.get_log_preview_url.assert_not_called()

    def test_get_missing(self, service, mock_training_repo, index):
        mock_training_repo.get.side_effect = NotFound("missing")
        with pytest.raises(NotFound):
            service.get(index)


class TestTrainingList:
    """Test cases for TrainingService.list."""

    def test_list(self, service, mock_training_repo, sample_user_training, alice):
        mock_training_repo.list.return_value = [TrainingSummary.from_training(sample_user_training)]

        v = service.list(alice, "p1")

        assert len(v) == 1
        assert v[0].id == "t1"
        assert v[0].status == "scheduling"
        mock_training_repo.list.assert_called_once_with(alice, "p1")


class TestJobDetailUpdates:
    """Test cases for status reports and termination."""

    def test_update_passes_done_statuses(self, service, mock_training_repo, reconciler, index):
        """Test that the done check is delegated to the store in one call."""
        mock_training_repo.update_job_detail.return_value = True
        detail = JobDetail(status="Completed", duration=120)

        service.update_job_detail(index, detail)

        mock_training_repo.update_job_detail.assert_called_once_with(
            index, detail, reconciler.done_statuses,
        )
        mock_training_repo.get_job_detail.assert_not_called()

    def test_update_finished_job_is_dropped(self, reconciler, training_repo,
                                            sample_training_config, alice):
        """Test that a done job keeps its final detail."""
        service = TrainingService(repo=training_repo, reconciler=reconciler)
        index = training_repo.save(UserTraining(
            owner=alice, project_id="p1", config=sample_training_config,
        ))

        service.update_job_detail(index, JobDetail(status="Running"))
        service.update_job_detail(index, JobDetail(status="Completed", duration=60))
        service.update_job_detail(index, JobDetail(status="Running"))

        assert training_repo.get_job_detail(index) == JobDetail(status="Completed", duration=60)

    def test_late_reports_never_undo_a_finished_job(self, reconciler, training_repo,
                                                    sample_training_config, alice):
        """Test that concurrent running reports cannot overwrite a done status."""
        service = TrainingService(repo=training_repo, reconciler=reconciler)
        index = training_repo.save(UserTraining(
            owner=alice, project_id="p1", config=sample_training_config,
        ))
        finished = threading.Event()

        def report_running():
            for _ in range(200):
                service.update_job_detail(index, JobDetail(status="Running"))

        def report_completed():
            service.update_job_detail(index, JobDetail(status="Completed"))
            finished.set()

        threads = [threading.Thread(target=report_running) for _ in range(4)]
        threads.append(threading.Thread(target=report_completed))
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert finished.is_set()
        assert training_repo.get_job_detail(index).status == "Completed"

    def test_terminate(self, service, mock_training_repo, mock_training_platform,
                       sample_user_training, index):
        mock_training_repo.get.return_value = sample_user_training

        service.terminate(index, mock_training_platform)

        mock_training_platform.terminate.assert_called_once_with("job-1")

    def test_terminate_finished_job(self, service, mock_training_repo,
                                    mock_training_platform, sample_user_training, index):
        sample_user_training.job_detail = JobDetail(status="Terminated")
        mock_training_repo.get.return_value = sample_user_training

        service.terminate(index, mock_training_platform)

        mock_training_platform.terminate.assert_not_called()

    def test_terminate_failure_is_wrapped(self, service, mock_training_repo,
                                          mock_training_platform, sample_user_training, index):
        mock_training_repo.get.return_value = sample_user_training
        mock_training_platform.terminate.side_effect = ConnectionError("reset")

        with pytest.raises(ExternalProviderError):
            service.terminate(index, mock_training_platform)
