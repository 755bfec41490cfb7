"""Ports to external platforms the domain depends on."""

from .repo_provider import RepoOption, RepoProvider
from .training_platform import TrainingPlatform

__all__ = [
    'RepoOption',
    'RepoProvider',
    'TrainingPlatform',
]
