"""Commands accepted by the application services."""

from .project_commands import (
    ProjectCreateCmd, ProjectForkCmd, ProjectUpdateCmd, ResourceListCmd,
    ResourceTagsUpdateCmd,
)
from .training_commands import (
    INVALID_TRAINING_CMD, INVALID_TRAINING_INPUT, TrainingCreateCmd,
)

__all__ = [
    'ProjectCreateCmd',
    'ProjectForkCmd',
    'ProjectUpdateCmd',
    'ResourceListCmd',
    'ResourceTagsUpdateCmd',
    'INVALID_TRAINING_CMD',
    'INVALID_TRAINING_INPUT',
    'TrainingCreateCmd',
]
