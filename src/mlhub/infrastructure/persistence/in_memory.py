"""In-memory document store.

Each mapper serialises its writes with a lock, so every method behaves as a
single atomic document operation even when called from several threads.
Documents are copied on the way in and out; callers never share state with
the store.
"""
import threading
import uuid
from typing import Collection, Dict, List, Tuple

from mlhub.infrastructure.persistence.documents import (
    ActivityDO, JobDetailDO, ProjectDO, ProjectPropertyDO, RelatedResourceDO,
    ResourceIndexDO, ResourceListDO, TrainingDO,
)
from mlhub.infrastructure.persistence.errors import (
    DocExistsError, DocNotExistsError, VersionMismatchError,
)
from mlhub.infrastructure.persistence.mappers import (
    ActivityMapper, ProjectMapper, TrainingMapper,
)
from mlhub.shared.timeutil import now


def _new_id() -> str:
    return uuid.uuid4().hex


class InMemoryProjectMapper(ProjectMapper):

    def __init__(self):
        self._lock = threading.Lock()
        self._docs: Dict[Tuple[str, str], ProjectDO] = {}

    def insert(self, do: ProjectDO) -> str:
        with self._lock:
            for d in self._docs.values():
                if d.owner == do.owner and d.name == do.name:
                    raise DocExistsError(f"project {do.owner}/{do.name} exists")

            doc = do.model_copy(deep=True)
            doc.id = _new_id()
            doc.version = 0
            self._docs[(doc.owner, doc.id)] = doc
            return doc.id

    def get(self, owner: str, identity: str) -> ProjectDO:
        with self._lock:
            return self._get(owner, identity).model_copy(deep=True)

    def get_by_name(self, owner: str, name: str) -> ProjectDO:
        with self._lock:
            for d in self._docs.values():
                if d.owner == owner and d.name == name:
                    return d.model_copy(deep=True)
        raise DocNotExistsError(f"project {owner}/{name} does not exist")

    def list(self, owner: str, do: ResourceListDO) -> List[ProjectDO]:
        with self._lock:
            r = [
                d.model_copy(deep=True) for d in self._docs.values()
                if d.owner == owner
                and (not do.name or do.name in d.name)
                and (not do.repo_type or d.repo_type == do.repo_type)
            ]
        r.sort(key=lambda d: d.updated_at, reverse=True)
        return r

    def list_users_projects(self, opts: Dict[str, List[str]]) -> List[ProjectDO]:
        with self._lock:
            return [
                self._docs[(owner, i)].model_copy(deep=True)
                for owner, ids in opts.items()
                for i in ids
                if (owner, i) in self._docs
            ]

    def increase_fork(self, owner: str, identity: str) -> None:
        with self._lock:
            self._get(owner, identity).fork_count += 1

    def add_like(self, owner: str, identity: str) -> None:
        with self._lock:
            self._get(owner, identity).like_count += 1

    def remove_like(self, owner: str, identity: str) -> None:
        with self._lock:
            d = self._get(owner, identity)
            if d.like_count > 0:
                d.like_count -= 1

    def add_related_model(self, do: RelatedResourceDO) -> None:
        self._add_related(do, "related_models")

    def remove_related_model(self, do: RelatedResourceDO) -> None:
        self._remove_related(do, "related_models")

    def add_related_dataset(self, do: RelatedResourceDO) -> None:
        self._add_related(do, "related_datasets")

    def remove_related_dataset(self, do: RelatedResourceDO) -> None:
        self._remove_related(do, "related_datasets")

    def update_property(self, do: ProjectPropertyDO) -> ProjectDO:
        with self._lock:
            d = self._get(do.owner, do.id)
            if d.version != do.version:
                raise VersionMismatchError(
                    f"project {do.owner}/{do.id}: version {do.version}, stored {d.version}"
                )
            if do.name != d.name:
                for other in self._docs.values():
                    if other.owner == do.owner and other.name == do.name:
                        raise DocExistsError(f"project {do.owner}/{do.name} exists")

            d.name = do.name
            d.desc = do.desc
            d.cover_id = do.cover_id
            d.repo_type = do.repo_type
            d.tags = list(do.tags)
            d.updated_at = now()
            d.version += 1
            return d.model_copy(deep=True)

    def _get(self, owner: str, identity: str) -> ProjectDO:
        d = self._docs.get((owner, identity))
        if d is None:
            raise DocNotExistsError(f"project {owner}/{identity} does not exist")
        return d

    def _add_related(self, do: RelatedResourceDO, attr: str) -> None:
        with self._lock:
            items: List[ResourceIndexDO] = getattr(self._get(do.owner, do.project_id), attr)
            r = do.resource()
            if r not in items:
                items.append(r)

    def _remove_related(self, do: RelatedResourceDO, attr: str) -> None:
        with self._lock:
            d = self._get(do.owner, do.project_id)
            r = do.resource()
            setattr(d, attr, [i for i in getattr(d, attr) if i != r])


class InMemoryTrainingMapper(TrainingMapper):

    def __init__(self):
        self._lock = threading.Lock()
        self._docs: Dict[Tuple[str, str, str], TrainingDO] = {}

    def insert(self, do: TrainingDO) -> str:
        with self._lock:
            doc = do.model_copy(deep=True)
            doc.id = _new_id()
            self._docs[(doc.owner, doc.project_id, doc.id)] = doc
            return doc.id

    def get(self, owner: str, project_id: str, identity: str) -> TrainingDO:
        with self._lock:
            return self._get(owner, project_id, identity).model_copy(deep=True)

    def list(self, owner: str, project_id: str) -> List[TrainingDO]:
        with self._lock:
            r = [
                d.model_copy(deep=True) for (o, p, _), d in self._docs.items()
                if o == owner and p == project_id
            ]
        r.sort(key=lambda d: d.created_at, reverse=True)
        return r

    def get_job_detail(self, owner: str, project_id: str, identity: str) -> JobDetailDO:
        with self._lock:
            return self._get(owner, project_id, identity).job_detail.model_copy()

    def update_job_detail(self, owner: str, project_id: str, identity: str,
                          detail: JobDetailDO, done_statuses: Collection[str] = ()) -> bool:
        with self._lock:
            d = self._get(owner, project_id, identity)
            if d.job_detail.status and d.job_detail.status in done_statuses:
                return False
            d.job_detail = detail.model_copy()
            d.version += 1
            return True

    def _get(self, owner: str, project_id: str, identity: str) -> TrainingDO:
        d = self._docs.get((owner, project_id, identity))
        if d is None:
            raise DocNotExistsError(f"training {owner}/{project_id}/{identity} does not exist")
        return d


class InMemoryActivityMapper(ActivityMapper):

    def __init__(self):
        self._lock = threading.Lock()
        self._docs: List[ActivityDO] = []

    def insert(self, do: ActivityDO) -> None:
        with self._lock:
            self._docs.append(do.model_copy())

    def list(self, owner: str) -> List[ActivityDO]:
        with self._lock:
            return [d.model_copy() for d in self._docs if d.owner == owner]
