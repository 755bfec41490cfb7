"""Document storage: persisted shapes, mapper contracts and the in-memory
backend."""

from .in_memory import (
    InMemoryActivityMapper, InMemoryProjectMapper, InMemoryTrainingMapper,
)
from .mappers import ActivityMapper, ProjectMapper, TrainingMapper

__all__ = [
    'ActivityMapper',
    'ProjectMapper',
    'TrainingMapper',
    'InMemoryActivityMapper',
    'InMemoryProjectMapper',
    'InMemoryTrainingMapper',
]
