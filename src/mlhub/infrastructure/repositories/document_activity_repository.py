"""Activity repository backed by a document mapper."""
from mlhub.domain.entities.activity import UserActivity
from mlhub.domain.repositories.activity_repository import ActivityRepository
from mlhub.infrastructure.persistence.documents import ActivityDO
from mlhub.infrastructure.persistence.mappers import ActivityMapper
from mlhub.infrastructure.repositories.errors import converted_errors


class DocumentActivityRepository(ActivityRepository):

    def __init__(self, mapper: ActivityMapper):
        self.mapper = mapper

    def save(self, activity: UserActivity) -> None:
        r = activity.resource
        do = ActivityDO(
            owner=activity.owner.value,
            type=activity.type,
            time=activity.time,
            resource_type=r.type.value,
            resource_owner=r.owner.value,
            resource_id=r.id,
        )
        with converted_errors():
            self.mapper.insert(do)
