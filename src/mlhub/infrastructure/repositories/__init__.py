"""Infrastructure layer repository implementations.

This package contains concrete implementations of repository interfaces
that translate aggregates to persisted documents and delegate storage to
a document mapper.
"""

from .document_activity_repository import DocumentActivityRepository
from .document_project_repository import DocumentProjectRepository
from .document_training_repository import DocumentTrainingRepository

__all__ = [
    'DocumentActivityRepository',
    'DocumentProjectRepository',
    'DocumentTrainingRepository'
]
