"""Tests for the document-backed project repository."""
from dataclasses import replace

import pytest

from mlhub.domain.entities.project import (
    ProjectPropertyUpdate, RelatedResourceUpdate, ResourceIndex,
)
from mlhub.domain.errors import (
    ConcurrentModification, DuplicateCreating, InvalidValue, NotFound,
)
from mlhub.domain.repositories.project_repository import (
    ResourceListOption, UserResourceListOption,
)
from mlhub.domain.values import Account, ProjName, RepoType, ResourceDesc
from mlhub.infrastructure.persistence.errors import DocNotExistsError, MapperError
from mlhub.infrastructure.repositories.errors import convert_error, converted_errors


@pytest.fixture
def saved(project_repo, sample_project_cmd):
    p = sample_project_cmd.to_project()
    p.repo_id = "repo-1"
    return project_repo.save(p)


class TestSave:
    """Test cases for DocumentProjectRepository.save."""

    def test_save_assigns_id(self, saved):
        assert saved.id != ""
        assert saved.version == 0
        assert saved.created_at > 0
        assert saved.updated_at == saved.created_at

    def test_save_does_not_mutate_argument(self, project_repo, sample_project_cmd):
        p = sample_project_cmd.to_project()
        project_repo.save(p)
        assert p.is_new

    def test_save_existing_project(self, project_repo, sample_project):
        """Test that only new projects can be saved."""
        with pytest.raises(ValueError, match="must be a new project"):
            project_repo.save(sample_project)

    def test_save_duplicate_name(self, project_repo, sample_project_cmd, saved):
        with pytest.raises(DuplicateCreating):
            project_repo.save(sample_project_cmd.to_project())


class TestReads:
    """Test cases for reads."""

    def test_get_round_trip(self, project_repo, saved, alice):
        p = project_repo.get(alice, saved.id)

        assert p.name == saved.name
        assert p.desc == saved.desc
        assert p.protocol == saved.protocol
        assert p.repo_id == "repo-1"

    def test_get_missing(self, project_repo, alice):
        with pytest.raises(NotFound):
            project_repo.get(alice, "missing")

    def test_get_by_name(self, project_repo, saved, alice):
        assert project_repo.get_by_name(alice, ProjName("proj")).id == saved.id
        with pytest.raises(NotFound):
            project_repo.get_by_name(alice, ProjName("other"))

    def test_list(self, project_repo, saved, alice):
        assert [p.id for p in project_repo.list(alice, ResourceListOption())] == [saved.id]
        assert project_repo.list(alice, ResourceListOption(repo_type=RepoType("private"))) == []

    def test_find_user_projects(self, project_repo, saved, alice):
        v = project_repo.find_user_projects([UserResourceListOption(owner=alice, ids=[saved.id])])
        assert [p.id for p in v] == [saved.id]

    def test_corrupted_document(self, project_repo, project_mapper, saved, alice):
        """Test that illegal stored values fail on read."""
        project_mapper._docs[("alice", saved.id)].type = "robotics"
        with pytest.raises(InvalidValue):
            project_repo.get(alice, saved.id)


class TestUpdates:
    """Test cases for counters, relations and property updates."""

    def test_likes_and_forks(self, project_repo, saved, alice):
        project_repo.add_like(alice, saved.id)
        project_repo.add_like(alice, saved.id)
        project_repo.remove_like(alice, saved.id)
        project_repo.increase_fork(saved.index())

        p = project_repo.get(alice, saved.id)
        assert p.like_count == 1
        assert p.fork_count == 1

    def test_like_missing(self, project_repo, alice):
        with pytest.raises(NotFound):
            project_repo.add_like(alice, "missing")

    def test_related_resources(self, project_repo, saved, alice):
        info = RelatedResourceUpdate(
            project=saved.index(), resource=ResourceIndex(owner=Account("bob01"), id="m1"),
        )
        project_repo.add_related_model(info)
        project_repo.add_related_dataset(info)

        p = project_repo.get(alice, saved.id)
        assert p.related_models == [ResourceIndex(owner=Account("bob01"), id="m1")]
        assert len(p.related_datasets) == 1

        project_repo.remove_related_model(info)
        project_repo.remove_related_dataset(info)
        p = project_repo.get(alice, saved.id)
        assert p.related_models == []
        assert p.related_datasets == []

    def test_update_property(self, project_repo, saved):
        props = replace(saved.props, desc=ResourceDesc("changed"), tags=["nlp"])

        p = project_repo.update_property(ProjectPropertyUpdate(
            owner=saved.owner, id=saved.id, version=saved.version, props=props,
        ))

        assert p.desc.value == "changed"
        assert p.tags == ["nlp"]
        assert p.version == saved.version + 1

    def test_update_property_stale(self, project_repo, saved):
        """Test that a second update with the same version is rejected."""
        info = ProjectPropertyUpdate(
            owner=saved.owner, id=saved.id, version=saved.version,
            props=replace(saved.props, desc=ResourceDesc("changed")),
        )
        project_repo.update_property(info)

        with pytest.raises(ConcurrentModification):
            project_repo.update_property(info)


class TestConvertError:
    """Test cases for convert_error."""

    def test_unknown_error_passes_through(self):
        e = MapperError("boom")
        assert convert_error(e) is e

    def test_converted_error_is_chained(self):
        """Test that a known mapper error is raised as a domain error."""
        cause = DocNotExistsError("gone")
        with pytest.raises(NotFound) as exc_info:
            with converted_errors():
                raise cause
        assert exc_info.value.__cause__ is cause

    def test_unknown_mapper_error_is_reraised_as_is(self):
        """Test that an unknown mapper error is not chained to itself."""
        e = MapperError("boom")
        with pytest.raises(MapperError) as exc_info:
            with converted_errors():
                raise e
        assert exc_info.value is e
        assert exc_info.value.__cause__ is None

    def test_other_errors_pass_untouched(self):
        with pytest.raises(KeyError):
            with converted_errors():
                raise KeyError("x")
