"""Application layer services - Use case implementations.

This package contains the services that orchestrate domain objects,
repository ports and external platforms to fulfil the project and
training use cases.
"""

from .project_service import ProjectService
from .training_service import TrainingService

__all__ = [
    'ProjectService',
    'TrainingService'
]
