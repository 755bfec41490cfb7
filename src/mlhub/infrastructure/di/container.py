"""Dependency injection container for clean component wiring."""
from typing import Any, Dict, Optional

from mlhub.application.services.project_service import ProjectService
from mlhub.application.services.training_service import TrainingService
from mlhub.application.status import StatusReconciler
from mlhub.domain.platform.repo_provider import RepoProvider
from mlhub.domain.platform.training_platform import TrainingPlatform
from mlhub.domain.repositories.activity_repository import ActivityRepository
from mlhub.domain.repositories.project_repository import ProjectRepository
from mlhub.domain.repositories.training_repository import TrainingRepository
from mlhub.infrastructure.config.config_loader import (
    LoggingConfig, PersistenceConfig, TrainingSettings,
)
from mlhub.infrastructure.persistence.in_memory import (
    InMemoryActivityMapper, InMemoryProjectMapper, InMemoryTrainingMapper,
)
from mlhub.infrastructure.repositories.document_activity_repository import DocumentActivityRepository
from mlhub.infrastructure.repositories.document_project_repository import DocumentProjectRepository
from mlhub.infrastructure.repositories.document_training_repository import DocumentTrainingRepository

# Mapper classes per persistence backend, keyed by aggregate
_MAPPER_BACKENDS = {
    'memory': {
        'project': InMemoryProjectMapper,
        'training': InMemoryTrainingMapper,
        'activity': InMemoryActivityMapper,
    },
}


class Container:
    """Simple dependency injection container.

    Provides centralized component wiring and dependency management,
    following the Dependency Inversion Principle. Repositories and services
    are created lazily and shared. External platforms are not built here;
    the host application registers its implementations.
    """

    def __init__(self):
        """Initialize container with empty service registry."""
        self._services: Dict[str, Any] = {}
        self._configs: Dict[str, Any] = {
            'logging': LoggingConfig(),
            'training': TrainingSettings(),
            'persistence': PersistenceConfig()
        }

    def register_configs(self, logging_config: Optional[LoggingConfig] = None,
                         training_settings: Optional[TrainingSettings] = None,
                         persistence_config: Optional[PersistenceConfig] = None) -> None:
        """Register configuration objects; omitted ones keep their defaults.

        Args:
            logging_config: Logging settings
            training_settings: Job status rules
            persistence_config: Storage backend selection
        """
        if logging_config is not None:
            self._configs['logging'] = logging_config
        if training_settings is not None:
            self._configs['training'] = training_settings
        if persistence_config is not None:
            self._configs['persistence'] = persistence_config

    def register_repo_provider(self, provider: RepoProvider) -> None:
        self._services['repo_provider'] = provider

    def register_training_platform(self, platform: TrainingPlatform) -> None:
        self._services['training_platform'] = platform

    def get_repo_provider(self) -> RepoProvider:
        if 'repo_provider' not in self._services:
            raise KeyError("Repository provider not registered")
        return self._services['repo_provider']

    def get_training_platform(self) -> TrainingPlatform:
        if 'training_platform' not in self._services:
            raise KeyError("Training platform not registered")
        return self._services['training_platform']

    def get_project_repository(self) -> ProjectRepository:
        """Get project repository instance (singleton pattern)."""
        if 'project_repo' not in self._services:
            self._services['project_repo'] = DocumentProjectRepository(self._new_mapper('project'))
        return self._services['project_repo']

    def get_training_repository(self) -> TrainingRepository:
        """Get training repository instance (singleton pattern)."""
        if 'training_repo' not in self._services:
            self._services['training_repo'] = DocumentTrainingRepository(self._new_mapper('training'))
        return self._services['training_repo']

    def get_activity_repository(self) -> ActivityRepository:
        """Get activity repository instance (singleton pattern)."""
        if 'activity_repo' not in self._services:
            self._services['activity_repo'] = DocumentActivityRepository(self._new_mapper('activity'))
        return self._services['activity_repo']

    def _new_mapper(self, kind: str) -> Any:
        """Build the ``kind`` mapper of the configured persistence backend."""
        backend = self._configs['persistence'].backend
        if backend not in _MAPPER_BACKENDS:
            raise ValueError(f"Unsupported persistence backend: {backend}")
        return _MAPPER_BACKENDS[backend][kind]()

    def get_status_reconciler(self) -> StatusReconciler:
        if 'status_reconciler' not in self._services:
            settings: TrainingSettings = self._configs['training']
            self._services['status_reconciler'] = StatusReconciler(
                done_statuses=settings.done_statuses,
                scheduling_status=settings.scheduling_status,
            )
        return self._services['status_reconciler']

    def get_project_service(self) -> ProjectService:
        """Get project service instance (singleton pattern)."""
        if 'project_service' not in self._services:
            self._services['project_service'] = ProjectService(
                repo=self.get_project_repository(),
                activity=self.get_activity_repository()
            )
        return self._services['project_service']

    def get_training_service(self) -> TrainingService:
        """Get training service instance (singleton pattern)."""
        if 'training_service' not in self._services:
            self._services['training_service'] = TrainingService(
                repo=self.get_training_repository(),
                reconciler=self.get_status_reconciler()
            )
        return self._services['training_service']

    def get_config(self, config_name: str) -> Any:
        """Get registered configuration by name.

        Args:
            config_name: Name of configuration ('logging', 'training', 'persistence')

        Returns:
            Configuration object

        Raises:
            KeyError: If configuration not found
        """
        if config_name not in self._configs:
            raise KeyError(f"Configuration '{config_name}' not registered")
        return self._configs[config_name]

    def clear_services(self) -> None:
        """Clear service registry (useful for testing)."""
        self._services.clear()

