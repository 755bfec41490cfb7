"""Transport DTOs - the stable JSON shapes exposed upward."""

from .project_dto import ProjectDTO
from .training_dto import (
    ComputeDTO, TrainingDTO, TrainingIndexDTO, TrainingSummaryDTO,
)

__all__ = [
    'ProjectDTO',
    'ComputeDTO',
    'TrainingDTO',
    'TrainingIndexDTO',
    'TrainingSummaryDTO',
]
