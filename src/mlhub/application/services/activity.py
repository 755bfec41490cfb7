"""Best-effort recording of user activities."""
import logging

from mlhub.domain.entities.activity import UserActivity
from mlhub.domain.entities.project import ResourceObject
from mlhub.domain.repositories.activity_repository import ActivityRepository
from mlhub.domain.values import Account, ResourceType
from mlhub.shared.timeutil import now

logger = logging.getLogger(__name__)


def gen_activity(owner: Account, activity_type: str, resource_type: ResourceType,
                 resource_owner: Account, resource_id: str) -> UserActivity:
    return UserActivity(
        owner=owner,
        type=activity_type,
        time=now(),
        resource=ResourceObject(type=resource_type, owner=resource_owner, id=resource_id),
    )


def record_activity(repo: ActivityRepository, activity: UserActivity) -> None:
    """Save ``activity``; a failure is logged and never propagated."""
    try:
        repo.save(activity)
    except Exception as e:
        logger.warning(
            "failed to record %s activity of %s on %s %s: %s",
            activity.type, activity.owner, activity.resource.type,
            activity.resource.id, e,
        )
