"""User activity - append-only audit record."""
from dataclasses import dataclass

from mlhub.domain.entities.project import ResourceObject
from mlhub.domain.values import Account

ACTIVITY_TYPE_CREATE = "create"
ACTIVITY_TYPE_FORK = "fork"
ACTIVITY_TYPE_LIKE = "like"


@dataclass(frozen=True)
class UserActivity:
    owner: Account
    type: str
    time: int
    resource: ResourceObject
