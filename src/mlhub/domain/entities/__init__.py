"""Domain entities - Core business objects.

This package contains the aggregates and supporting objects of the
project/training domain:

- Project: A user's workspace backed by an external repository
- UserTraining: A training job submitted for a project
- UserActivity: Audit record of user actions
"""

from .activity import (
    ACTIVITY_TYPE_CREATE, ACTIVITY_TYPE_FORK, ACTIVITY_TYPE_LIKE, UserActivity,
)
from .project import (
    Project, ProjectModifiableProperty, ProjectPropertyUpdate,
    RelatedResourceUpdate, ResourceIndex, ResourceObject,
)
from .training import (
    Compute, Input, JobDetail, JobInfo, KeyValue, TrainingConfig,
    TrainingIndex, TrainingSummary, UserTraining,
)

__all__ = [
    'ACTIVITY_TYPE_CREATE',
    'ACTIVITY_TYPE_FORK',
    'ACTIVITY_TYPE_LIKE',
    'UserActivity',
    'Project',
    'ProjectModifiableProperty',
    'ProjectPropertyUpdate',
    'RelatedResourceUpdate',
    'ResourceIndex',
    'ResourceObject',
    'Compute',
    'Input',
    'JobDetail',
    'JobInfo',
    'KeyValue',
    'TrainingConfig',
    'TrainingIndex',
    'TrainingSummary',
    'UserTraining',
]
