"""Repository interfaces for data access.

This package defines abstract interfaces for data access operations,
following the Repository pattern to decouple business logic from
data storage implementations.
"""

from .activity_repository import ActivityRepository
from .project_repository import (
    ProjectRepository, ResourceListOption, UserResourceListOption,
)
from .training_repository import TrainingRepository

__all__ = [
    'ActivityRepository',
    'ProjectRepository',
    'ResourceListOption',
    'UserResourceListOption',
    'TrainingRepository',
]
